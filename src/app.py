# ============================================================
# Search Banners FastAPI App
# ------------------------------------------------------------
# Runs one search session per request:
#   - organic results + sponsored banners in
#   - merged layout out, banners reported off screen on close
# ============================================================

import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

# --- Local imports ---
from src.settings import settings
from src.banners import Banner, BannerKind, cache
from src.search import SearchSession

logger = logging.getLogger(__name__)

# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title=settings.app_name, version="0.1")

# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class BannerIn(BaseModel):
    banner_id: str
    kind: BannerKind

class SearchRequest(BaseModel):
    query: str
    results: List[str] = []
    banners: Optional[List[BannerIn]] = None

class LayoutRow(BaseModel):
    type: str
    position: int
    container_index: int
    result: Optional[str] = None
    banner_id: Optional[str] = None

class SearchResponse(BaseModel):
    query: str
    items: List[LayoutRow]

# ------------------------------------------------------------
# 🔎 Search route
# ------------------------------------------------------------
@app.post("/search", response_model=SearchResponse)
def search(req: SearchRequest):
    with SearchSession(tracker=cache, debug=settings.DEBUG) as session:
        session.set_results(req.results)
        try:
            for b in req.banners or []:
                session.add_banner(Banner(banner_id=b.banner_id, kind=b.kind))
        except AssertionError as e:
            raise HTTPException(status_code=422, detail=str(e))

        items = []
        for row, payload in session.layout():
            if row.from_banner:
                # returned rows count as shown
                session.mark_on_screen(row.container_index)
                items.append(LayoutRow(
                    type=row.item_type.value,
                    position=row.preferred_position,
                    container_index=row.container_index,
                    banner_id=payload.banner_id,
                ))
            else:
                items.append(LayoutRow(
                    type=row.item_type.value,
                    position=row.preferred_position,
                    container_index=row.container_index,
                    result=payload,
                ))

    logger.info("Search %r: %d rows", req.query, len(items))
    return SearchResponse(query=req.query, items=items)

# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}

@app.get("/")
def hello():
    return {"message": f"{settings.app_name} service running."}
