from .config import SimulationConfig
from .session import SimulationSession, ConfigLockedError, ExportUnavailableError
from .price import LinearPriceModel, ExponentialPriceModel, create_price_model
from .history import PriceSeries, BalanceLog, PricePoint, BalanceEvent
