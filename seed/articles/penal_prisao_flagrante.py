"""Direitos de quem é preso em flagrante."""
from datetime import datetime

from seed.core import ArticleSeed, register_article


register_article(
    ArticleSeed(
        category_slug="direito-penal",
        title="Prisão em flagrante: os direitos de quem é detido",
        slug="prisao-em-flagrante-direitos",
        excerpt=(
            "Direito ao silêncio, a um advogado e à audiência de custódia em até 24 horas. "
            "Conheça as garantias previstas na Constituição."
        ),
        content=(
            "## Garantias imediatas\n\n"
            "A pessoa presa deve ser informada de seus direitos, entre eles o de permanecer calada e o "
            "de ser assistida por advogado ou defensor público. A família ou alguém indicado deve ser "
            "comunicado da prisão.\n\n"
            "## Audiência de custódia\n\n"
            "Em até 24 horas o preso é apresentado a um juiz, que verifica a legalidade da prisão e "
            "decide entre relaxá-la, conceder liberdade provisória ou convertê-la em preventiva.\n\n"
            "## Fiança\n\n"
            "Nos crimes com pena máxima de até quatro anos, o próprio delegado pode arbitrar fiança."
        ),
        image_url="/images/articles/flagrante.jpg",
        publish_date=datetime(2023, 12, 5, 13, 0),
    )
)
