from core import settings
from services.simulation_service import SimulationService

# --- Services ---
simulation_service = SimulationService(initial_cash=settings.INITIAL_CASH, price_window=settings.PRICE_WINDOW)
