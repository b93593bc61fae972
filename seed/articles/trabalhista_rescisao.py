"""Verbas da rescisão sem justa causa."""
from datetime import datetime

from seed.core import ArticleSeed, register_article


register_article(
    ArticleSeed(
        category_slug="direito-trabalhista",
        title="Demissão sem justa causa: todas as verbas que você deve receber",
        slug="demissao-sem-justa-causa-verbas",
        excerpt=(
            "Saldo de salário, aviso prévio, férias, 13º e a multa de 40% do FGTS. "
            "Veja como conferir o seu termo de rescisão."
        ),
        content=(
            "## Verbas rescisórias\n\n"
            "Na dispensa sem justa causa o empregado recebe saldo de salário, aviso prévio trabalhado ou "
            "indenizado (30 dias mais 3 dias por ano de empresa, até 90), férias vencidas e proporcionais "
            "com o terço constitucional e 13º salário proporcional.\n\n"
            "## FGTS e seguro-desemprego\n\n"
            "O empregador deposita multa de 40% sobre o saldo do FGTS e libera o saque da conta. Quem "
            "cumpre os requisitos de tempo de trabalho também pode pedir o seguro-desemprego.\n\n"
            "## Prazo de pagamento\n\n"
            "Desde a reforma trabalhista, as verbas devem ser pagas em até 10 dias após o término do "
            "contrato. O atraso gera multa equivalente a um salário do empregado."
        ),
        image_url="/images/articles/rescisao.jpg",
        publish_date=datetime(2024, 4, 2, 8, 0),
        featured=True,
    )
)
