from pydantic import BaseModel, Field
from typing import Optional
from simulations.config import SimulationConfig

class CreateSimulationRequest(BaseModel):
    config: Optional[SimulationConfig] = None

class CommandRequest(BaseModel):
    simulation_id: int

class ConfigRequest(BaseModel):
    simulation_id: int
    asset_name: Optional[str] = None
    anchor_price: Optional[float] = Field(default=None, gt=0)
    micro_trade_amount: Optional[float] = Field(default=None, gt=0)
    trade_interval: Optional[float] = Field(default=None, gt=0)

    def changes(self) -> dict:
        """Only the setters the client actually sent."""
        return self.model_dump(exclude={"simulation_id"}, exclude_none=True)
