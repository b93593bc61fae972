"""Pensão alimentícia."""
from datetime import datetime

from seed.core import ArticleSeed, register_article


register_article(
    ArticleSeed(
        category_slug="direito-familia",
        title="Pensão alimentícia: quem paga, quanto e até quando",
        slug="pensao-alimenticia-quem-paga",
        excerpt=(
            "Não existe percentual fixo na lei. O valor equilibra a necessidade de quem "
            "recebe e a possibilidade de quem paga."
        ),
        content=(
            "## Binômio necessidade e possibilidade\n\n"
            "O juiz fixa a pensão considerando as despesas de quem recebe, como escola, saúde, "
            "alimentação e a parte do aluguel da casa onde a criança mora, e a renda de quem paga. "
            "Os 30% do salário citados com frequência são apenas uma referência da prática forense.\n\n"
            "## Até quando\n\n"
            "A maioridade não encerra a obrigação automaticamente. Filhos que cursam ensino superior "
            "costumam receber até os 24 anos, e o fim da pensão depende de decisão judicial.\n\n"
            "## Atraso\n\n"
            "O devedor de até três parcelas recentes pode ter prisão civil decretada. Parcelas mais "
            "antigas são cobradas por penhora de bens e salário."
        ),
        image_url="/images/articles/pensao.jpg",
        publish_date=datetime(2024, 2, 15, 11, 0),
    )
)
