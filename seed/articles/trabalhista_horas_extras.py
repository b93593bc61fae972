"""Cálculo de horas extras."""
from datetime import datetime

from seed.core import ArticleSeed, register_article


register_article(
    ArticleSeed(
        category_slug="direito-trabalhista",
        title="Horas extras: como calcular o adicional e os reflexos",
        slug="horas-extras-como-calcular",
        excerpt=(
            "O adicional mínimo é de 50% sobre a hora normal, mas o valor também "
            "reflete em férias, 13º, FGTS e descanso semanal."
        ),
        content=(
            "## Valor da hora\n\n"
            "Divida o salário mensal pelo divisor da jornada: 220 para quem trabalha 44 horas semanais. "
            "Sobre esse valor incide adicional de pelo menos 50% nos dias úteis e, em regra, de 100% "
            "em domingos e feriados.\n\n"
            "## Reflexos\n\n"
            "Horas extras habituais integram a remuneração e aumentam férias com um terço, 13º salário, "
            "depósitos de FGTS e o descanso semanal remunerado.\n\n"
            "## Banco de horas\n\n"
            "O banco de horas pode ser ajustado por acordo individual escrito se a compensação ocorrer "
            "em até seis meses. Horas não compensadas no prazo devem ser pagas com o adicional."
        ),
        image_url="/images/articles/horas-extras.jpg",
        publish_date=datetime(2023, 11, 8, 14, 0),
    )
)
