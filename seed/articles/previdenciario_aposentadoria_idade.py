"""Aposentadoria por idade depois da reforma."""
from datetime import datetime

from seed.core import ArticleSeed, register_article


register_article(
    ArticleSeed(
        category_slug="direito-previdenciario",
        title="Aposentadoria por idade: requisitos após a reforma da Previdência",
        slug="aposentadoria-por-idade-requisitos",
        excerpt=(
            "Idade mínima de 62 anos para mulheres e 65 para homens, com 15 ou 20 anos "
            "de contribuição. Veja as regras de transição."
        ),
        content=(
            "## Regra geral\n\n"
            "Para quem começou a contribuir depois de 13/11/2019, a aposentadoria exige 62 anos de "
            "idade para mulheres e 65 para homens, com 15 anos de contribuição para elas e 20 para eles.\n\n"
            "## Transição\n\n"
            "Quem já era filiado mantém 15 anos de contribuição para ambos os sexos. A idade mínima das "
            "mulheres subiu seis meses por ano até chegar a 62 anos em 2023.\n\n"
            "## Valor do benefício\n\n"
            "O cálculo parte de 60% da média de todos os salários de contribuição, acrescidos de 2% "
            "por ano que exceder 15 anos (mulheres) ou 20 anos (homens)."
        ),
        image_url="/images/articles/aposentadoria.jpg",
        publish_date=datetime(2024, 3, 28, 9, 15),
        featured=True,
    )
)
