"""Ação de despejo por falta de pagamento."""
from datetime import datetime

from seed.core import ArticleSeed, register_article


register_article(
    ArticleSeed(
        category_slug="direito-imobiliario",
        title="Despejo por falta de pagamento: prazos e formas de defesa",
        slug="despejo-falta-de-pagamento",
        excerpt=(
            "O inquilino atrasado pode evitar a desocupação quitando o débito dentro do "
            "prazo da contestação."
        ),
        content=(
            "## Purgação da mora\n\n"
            "Citado na ação de despejo, o locatário tem 15 dias para pagar os valores em atraso com "
            "multa, juros, custas e honorários. Quitando a dívida, a ação é extinta e o contrato "
            "continua.\n\n"
            "## Liminar\n\n"
            "Contratos sem garantia permitem ao juiz conceder liminar de desocupação em 15 dias. Por "
            "isso fiador, caução ou seguro-fiança mudam bastante o ritmo do processo.\n\n"
            "## Cobrança do ALUGUEL atrasado\n\n"
            "O locador pode cumular o pedido de despejo com a cobrança dos valores devidos, incluindo "
            "condomínio e IPTU quando o contrato os transfere ao inquilino."
        ),
        image_url="/images/articles/despejo.jpg",
        publish_date=datetime(2023, 9, 19, 16, 45),
    )
)
