"""
Read-only HTTP view of the watcher.
GET /api/alerts returns the last emitted alerts; GET /api/observed returns the observed set.
"""
from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse

from alert_log import read_last_alerts
from config import load_config
from errors import StoreError
from store import ObservedStore

app = FastAPI()


def get_store() -> ObservedStore:
    return ObservedStore(load_config().store_path)


@app.get("/api/alerts")
async def get_alerts(limit: int = Query(200, ge=1)) -> JSONResponse:
    """Return the last `limit` logged alerts (newest first)."""
    alerts = read_last_alerts(limit=limit)
    return JSONResponse(content={"alerts": alerts, "count": len(alerts)})


@app.get("/api/observed")
async def get_observed(store: ObservedStore = Depends(get_store)) -> JSONResponse:
    """Return the identifiers of every object reported so far, in report order."""
    try:
        ids = store.ids()
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return JSONResponse(content={"ids": ids, "count": len(ids)})


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
