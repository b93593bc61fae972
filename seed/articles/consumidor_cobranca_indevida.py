"""Cobrança indevida e devolução em dobro."""
from datetime import datetime

from seed.core import ArticleSeed, register_article


register_article(
    ArticleSeed(
        category_slug="direito-consumidor",
        title="Cobrança indevida: quando você tem direito à devolução em dobro",
        slug="cobranca-indevida-devolucao-em-dobro",
        excerpt=(
            "Pagou algo que não devia? O Código de Defesa do Consumidor garante a "
            "restituição em dobro em boa parte dos casos."
        ),
        content=(
            "## O que diz a lei\n\n"
            "O artigo 42, parágrafo único, do Código de Defesa do Consumidor determina que o "
            "consumidor cobrado em quantia indevida tem direito à repetição do indébito, por valor "
            "igual ao dobro do que pagou em excesso, acrescido de correção monetária e juros legais.\n\n"
            "## Quando a devolução é simples\n\n"
            "Se a empresa demonstrar engano justificável, a devolução passa a ser simples. Desde 2020 "
            "o Superior Tribunal de Justiça entende que não é preciso provar má-fé do fornecedor: basta "
            "que a cobrança contrarie a boa-fé objetiva.\n\n"
            "## Como agir\n\n"
            "1. Reúna faturas, comprovantes de pagamento e protocolos de atendimento.\n"
            "2. Registre reclamação no SAC e, se não resolver, no Procon ou em consumidor.gov.br.\n"
            "3. Persistindo o problema, o Juizado Especial Cível aceita causas de até 20 salários "
            "mínimos sem advogado."
        ),
        image_url="/images/articles/cobranca-indevida.jpg",
        publish_date=datetime(2024, 3, 12, 9, 0),
        featured=True,
    )
)
