import time
import logging
from typing import Optional
from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse

from core.config import simulation_service
from core.schemas import CreateSimulationRequest, CommandRequest, ConfigRequest
from simulations import ConfigLockedError, ExportUnavailableError

router = APIRouter()

def _raise_http(e: Exception, context: str):
    if isinstance(e, HTTPException):
        raise e
    if isinstance(e, (ConfigLockedError, ExportUnavailableError)):
        raise HTTPException(status_code=409, detail=str(e))
    if isinstance(e, ValueError) and str(e) == "Simulation not found":
        raise HTTPException(status_code=404, detail=str(e))
    if isinstance(e, ValueError):
        raise HTTPException(status_code=422, detail=str(e))
    logging.error(f"Failed to {context}: {e}")
    raise HTTPException(status_code=500, detail=str(e))

@router.get("/simulations")
def get_simulations():
    """List all simulations"""
    return [
        {
            "id": s.session_id,
            "asset_name": s.config.asset_name,
            "anchor_price": s.config.anchor_price,
            "run_state": s.run_state,
            "is_running": s.is_running
        }
        for s in simulation_service.get_all_sessions()
    ]

@router.post("/simulations")
def create_simulation(req: Optional[CreateSimulationRequest] = None):
    """Create a new simulation"""
    try:
        config = req.config if req else None
        s_id = simulation_service.create_session(config)
        return {"status": "success", "simulation_id": s_id, "message": "Simulation created"}
    except Exception as e:
        _raise_http(e, "create simulation")

@router.delete("/simulations/{simulation_id}")
def delete_simulation(simulation_id: int):
    try:
        simulation_service.delete_session(simulation_id)
        return {"status": "success", "message": "Simulation deleted"}
    except Exception as e:
        _raise_http(e, "delete simulation")

@router.get("/simulations/{simulation_id}/status")
def get_status(simulation_id: int):
    session = simulation_service.get_session(simulation_id)
    if not session:
        raise HTTPException(status_code=404, detail="Simulation not found")
    return session.get_state()

@router.get("/simulations/{simulation_id}/export")
def export_balance_history(simulation_id: int):
    """Export the cash balance log to CSV"""
    session = simulation_service.get_session(simulation_id)
    if not session:
        raise HTTPException(status_code=404, detail="Simulation not found")
    try:
        filename, content = session.export_csv()
    except Exception as e:
        _raise_http(e, "export balance history")

    return StreamingResponse(
        iter([content]),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"}
    )

@router.post("/simulations/start")
def start_simulation(cmd: CommandRequest):
    try:
        started = simulation_service.start_session(cmd.simulation_id)
        return {"status": "success", "message": "Simulation started" if started else "Simulation already running"}
    except Exception as e:
        _raise_http(e, "start simulation")

@router.post("/simulations/pause")
def pause_simulation(cmd: CommandRequest):
    try:
        paused = simulation_service.pause_session(cmd.simulation_id)
        return {"status": "success", "message": "Simulation paused" if paused else "Simulation not running"}
    except Exception as e:
        _raise_http(e, "pause simulation")

@router.post("/simulations/reset")
def reset_simulation(cmd: CommandRequest):
    try:
        simulation_service.reset_session(cmd.simulation_id)
        return {"status": "success", "message": "Simulation reset"}
    except Exception as e:
        _raise_http(e, "reset simulation")

@router.post("/simulations/config")
def update_config(req: ConfigRequest):
    try:
        changes = req.changes()
        logging.info(f"[update_config] Simulation {req.simulation_id}: {changes}")
        config = simulation_service.update_config(req.simulation_id, **changes)
        return {"status": "success", "message": "Configuration updated", "config": config.model_dump()}
    except Exception as e:
        _raise_http(e, "update config")

@router.get("/snapshot")
def get_full_snapshot():
    """All simulations' state for websocket push."""
    return {
        "simulations": [s.get_state() for s in simulation_service.get_all_sessions()],
        "timestamp": time.time()
    }
