"""Reajuste anual de locação residencial."""
from datetime import datetime

from seed.core import ArticleSeed, register_article


register_article(
    ArticleSeed(
        category_slug="direito-imobiliario",
        title="Reajuste do Aluguel: o que a Lei do Inquilinato permite",
        slug="reajuste-do-aluguel-lei-do-inquilinato",
        excerpt=(
            "O índice é escolhido no contrato e o reajuste só pode ocorrer uma vez a "
            "cada 12 meses. Saiba como negociar quando o IGP-M dispara."
        ),
        content=(
            "## Periodicidade\n\n"
            "A Lei 8.245/1991 e a legislação do Plano Real vedam reajustes em intervalo menor que um "
            "ano. O índice, normalmente IGP-M ou IPCA, precisa estar previsto no contrato.\n\n"
            "## Índice muito alto\n\n"
            "Nada impede que locador e locatário combinem outro índice ou um percentual menor. O "
            "acordo deve ser feito por escrito, em aditivo assinado pelas partes.\n\n"
            "## Revisional\n\n"
            "Depois de três anos de contrato sem acordo, qualquer das partes pode pedir ao juiz a "
            "revisão do valor para ajustá-lo ao preço de mercado."
        ),
        image_url="/images/articles/reajuste.jpg",
        publish_date=datetime(2024, 4, 2, 8, 0),
        featured=True,
    )
)
