"""Control API routes."""

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException

from ...app import Application
from ..schemas import MessageResponse, StatusResponse


class SimStatusResponse(BaseModel):
    """Response model for simulator status."""

    running: bool
    interval: float


class TickResponse(BaseModel):
    """Response model for a manual simulator tick."""

    produced: bool
    conversation_id: str | None = None
    account_id: str | None = None
    contact_name: str | None = None
    message: MessageResponse | None = None


def create_control_router(app: Application) -> APIRouter:
    """Create control router."""
    router = APIRouter(prefix="/api/control", tags=["control"])

    @router.post("/reset", response_model=StatusResponse)
    async def reset_system() -> dict:
        """Restore the demo data."""
        try:
            await app.reset()
            return {"status": "ok"}
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    @router.get("/sim", response_model=SimStatusResponse)
    async def sim_status() -> dict:
        return {"running": app.sim.running, "interval": app.sim.interval}

    @router.post("/sim/start", response_model=StatusResponse)
    async def start_sim() -> dict:
        """Start SIM simulation."""
        try:
            await app.sim.start()
            return {"status": "ok"}
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    @router.post("/sim/stop", response_model=StatusResponse)
    async def stop_sim() -> dict:
        """Stop SIM simulation."""
        try:
            await app.sim.stop()
            return {"status": "ok"}
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    @router.post("/sim/tick", response_model=TickResponse)
    async def tick_sim() -> dict:
        """Produce one simulated inbound message now."""
        result = await app.sim.run_once()
        if result is None:
            return {"produced": False}
        return {
            "produced": True,
            "conversation_id": result.conversation_id,
            "account_id": result.account.id,
            "contact_name": result.contact.name,
            "message": result.message,
        }

    return router
