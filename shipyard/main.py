
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shipyard.config import settings
from shipyard.routers import catalog, designs, mods

app = FastAPI(
    title="Shipyard",
    description="Load, upgrade and serve versioned starship design documents",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(designs.router)
app.include_router(catalog.router)
app.include_router(mods.router)


@app.get("/health")
async def health_check():
    return {"status": "ok"}
