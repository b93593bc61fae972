"""Prazos para reclamar de produto com defeito."""
from datetime import datetime

from seed.core import ArticleSeed, register_article


register_article(
    ArticleSeed(
        category_slug="direito-consumidor",
        title="Produto com defeito: prazos para reclamar e o que exigir da loja",
        slug="produto-com-defeito-prazos",
        excerpt=(
            "Trinta ou noventa dias? Entenda os prazos de garantia legal e as três "
            "alternativas quando o conserto não sai em um mês."
        ),
        content=(
            "## Garantia legal\n\n"
            "Independentemente da garantia do fabricante, o consumidor tem 30 dias para reclamar de "
            "vícios aparentes em produtos não duráveis e 90 dias para produtos duráveis, como "
            "eletrodomésticos e celulares. Para vícios ocultos, o prazo começa quando o defeito aparece.\n\n"
            "## Trinta dias para consertar\n\n"
            "O fornecedor tem até 30 dias para sanar o problema. Passado esse prazo, você escolhe entre "
            "a troca por outro produto igual, a devolução do valor pago corrigido ou o abatimento "
            "proporcional do preço.\n\n"
            "## Loja e fabricante respondem juntos\n\n"
            "A responsabilidade é solidária: você pode cobrar tanto a loja quanto o fabricante, e "
            "nenhum deles pode simplesmente mandar você procurar o outro."
        ),
        image_url="/images/articles/produto-defeito.jpg",
        publish_date=datetime(2024, 1, 22, 10, 30),
    )
)
