"""Fixed catalog of categories and solution cards."""
from models import InsertCategory, InsertSolution


CATEGORY_SEEDS = [
    InsertCategory(
        name="Direito do Consumidor",
        slug="direito-consumidor",
        description="Seus direitos nas compras, contratos de serviço e cobranças do dia a dia.",
        icon_name="shopping-cart",
        image_url="/images/categories/consumidor.jpg",
    ),
    InsertCategory(
        name="Direito Trabalhista",
        slug="direito-trabalhista",
        description="Contrato de trabalho, rescisão, férias, horas extras e FGTS.",
        icon_name="briefcase",
        image_url="/images/categories/trabalhista.jpg",
    ),
    InsertCategory(
        name="Direito de Família",
        slug="direito-familia",
        description="Divórcio, guarda, pensão alimentícia e união estável.",
        icon_name="users",
        image_url="/images/categories/familia.jpg",
    ),
    InsertCategory(
        name="Direito Imobiliário",
        slug="direito-imobiliario",
        description="Locação, compra e venda de imóveis, condomínio e usucapião.",
        icon_name="home",
        image_url="/images/categories/imobiliario.jpg",
    ),
    InsertCategory(
        name="Direito Previdenciário",
        slug="direito-previdenciario",
        description="Aposentadorias, auxílios e benefícios do INSS.",
        icon_name="shield",
        image_url="/images/categories/previdenciario.jpg",
    ),
    InsertCategory(
        name="Direito Penal",
        slug="direito-penal",
        description="Garantias de quem é investigado, preso ou vítima de crime.",
        icon_name="scale",
        image_url="/images/categories/penal.jpg",
    ),
]


SOLUTION_SEEDS = [
    InsertSolution(
        title="Calculadora de Rescisão",
        description="Estime as verbas rescisórias a partir do salário, da data de admissão e do tipo de desligamento.",
        image_url="/images/solutions/calculadora-rescisao.jpg",
        link="/calculadoras/rescisao",
        link_text="Calcular agora",
    ),
    InsertSolution(
        title="Calculadora de Reajuste de Aluguel",
        description="Atualize o valor do aluguel pelo IGP-M ou IPCA acumulado no período do contrato.",
        image_url="/images/solutions/calculadora-aluguel.jpg",
        link="/calculadoras/reajuste-aluguel",
        link_text="Simular reajuste",
    ),
    InsertSolution(
        title="Modelos de Documentos",
        description="Notificações, reclamações e requerimentos prontos para adaptar ao seu caso.",
        image_url="/images/solutions/modelos.jpg",
        link="/modelos",
        link_text="Ver modelos",
    ),
    InsertSolution(
        title="Guia de Direitos Básicos",
        description="Um resumo em linguagem simples dos direitos que mais aparecem no cotidiano.",
        image_url="/images/solutions/guia.jpg",
        link="/guia",
        link_text="Ler o guia",
    ),
]
