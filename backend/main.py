import logging
import uvicorn
from contextlib import asynccontextmanager
from fastapi import FastAPI, WebSocket
from fastapi.middleware.cors import CORSMiddleware

from core import settings
from core.config import simulation_service
from simulations import SimulationConfig
from api.router import router
from api.ws import websocket_endpoint

# Configure logging
logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL, logging.WARNING), format='%(asctime)s - %(levelname)s - %(message)s')

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: the browser page drives a single default simulation
    if not simulation_service.sessions:
        s_id = simulation_service.create_session(SimulationConfig())
        logging.info(f"Default simulation {s_id} ready")

    yield
    # Shutdown: timers are daemon threads, but cancel them so no tick fires during teardown
    simulation_service.shutdown()

app = FastAPI(title="Fluid Trading Simulator", lifespan=lifespan)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api")

@app.websocket("/ws")
async def ws(websocket: WebSocket):
    await websocket_endpoint(websocket)

if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD, access_log=False)
