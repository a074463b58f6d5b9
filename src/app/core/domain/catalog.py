"""Static instrument catalog."""
from src.app.core.domain.models import AssetCategory, AssetName, CatalogEntry

ASSET_CATALOG: tuple[CatalogEntry, ...] = (
    CatalogEntry(name=AssetName.PETR4, category=AssetCategory.STOCK, value=39.50),
    CatalogEntry(name=AssetName.VALE3, category=AssetCategory.STOCK, value=67.80),
    CatalogEntry(name=AssetName.ITUB4, category=AssetCategory.STOCK, value=30.20),
    CatalogEntry(name=AssetName.TESOURO_IPCA_2035, category=AssetCategory.GOVERNMENT_BOND, value=2900.00),
    CatalogEntry(name=AssetName.TESOURO_SELIC_2027, category=AssetCategory.GOVERNMENT_BOND, value=11800.00),
    CatalogEntry(name=AssetName.CDB_BANCO_INTER_1Y, category=AssetCategory.PRIVATE_BOND, value=1000.00),
    CatalogEntry(name=AssetName.LCI_CAIXA_2Y, category=AssetCategory.PRIVATE_BOND, value=5000.00),
    CatalogEntry(name=AssetName.USD_BRL, category=AssetCategory.CURRENCY, value=5.25),
    CatalogEntry(name=AssetName.EUR_BRL, category=AssetCategory.CURRENCY, value=5.65),
    CatalogEntry(name=AssetName.BITCOIN, category=AssetCategory.CRYPTO, value=355000.00),
    CatalogEntry(name=AssetName.ETHEREUM, category=AssetCategory.CRYPTO, value=18000.00),
    CatalogEntry(name=AssetName.GOLD_GRAM, category=AssetCategory.COMMODITY, value=370.00),
    CatalogEntry(name=AssetName.SOYBEAN_60KG, category=AssetCategory.COMMODITY, value=150.00),
    CatalogEntry(name=AssetName.CORN_60KG, category=AssetCategory.COMMODITY, value=65.00),
    CatalogEntry(name=AssetName.ARABICA_COFFEE_60KG, category=AssetCategory.COMMODITY, value=950.00),
)
