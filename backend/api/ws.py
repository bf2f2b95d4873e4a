import asyncio
import logging
import json
from fastapi import WebSocket, WebSocketDisconnect
from api.router import get_full_snapshot

def _fingerprint(snapshot: dict) -> str:
    # timestamp changes every call; compare the simulations only
    return json.dumps(snapshot.get("simulations"), sort_keys=True)

async def websocket_endpoint(websocket: WebSocket):
    await websocket.accept()

    last_snapshot = None

    try:
        # Send initial snapshot immediately
        initial_snapshot = get_full_snapshot()
        await websocket.send_json(initial_snapshot)
        last_snapshot = _fingerprint(initial_snapshot)

        while True:
            await asyncio.sleep(1)

            current_snapshot = get_full_snapshot()
            current = _fingerprint(current_snapshot)

            # Only send if data has changed
            if current != last_snapshot:
                await websocket.send_json(current_snapshot)
                last_snapshot = current

    except WebSocketDisconnect:
        pass
    except Exception as e:
        logging.error(f"WebSocket error: {e}")
