"""FastAPI main application for the missy card game backend"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .serialization import get_public_room_info
from .ws.server import manager, registry, router

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="Missy Card Game API", version="1.0.0")

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)

@app.get("/")
async def root():
    return {"message": "Missy Card Game API", "version": "1.0.0"}

@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "rooms": len(registry),
        "connections": manager.connection_count(),
        "room_details": [get_public_room_info(room) for room in registry]
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8080)
