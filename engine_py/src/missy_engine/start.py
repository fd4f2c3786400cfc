#!/usr/bin/env python3
"""Startup script for the missy card game backend"""

import os
import uvicorn
from pydantic import BaseModel, Field


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)
    log_level: str = "info"
    reload: bool = False

    @classmethod
    def from_env(cls) -> "ServerSettings":
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", 8080)),
            log_level=os.getenv("LOG_LEVEL", "info").lower(),
            reload=os.getenv("RELOAD", "false").lower() == "true",
        )


def main():
    settings = ServerSettings.from_env()

    print(f"🚀 Starting Missy Card Game Backend on {settings.host}:{settings.port}")
    print(f"📍 Health check available at: http://{settings.host}:{settings.port}/health")
    print(f"🔌 WebSocket endpoint: ws://{settings.host}:{settings.port}/ws")

    uvicorn.run(
        "missy_engine.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level
    )

if __name__ == "__main__":
    main()
