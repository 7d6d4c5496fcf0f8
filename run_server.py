#!/usr/bin/env python3
"""
Simple script to run the cooling load API server
"""
import uvicorn

from coolload import config

if __name__ == "__main__":
    print("Starting Cooling Load API Server...")
    print("Server will be available at: http://localhost:8000")
    print("API documentation: http://localhost:8000/docs")
    print("Health check: http://localhost:8000/health")
    print("\nPress Ctrl+C to stop the server\n")

    try:
        uvicorn.run(
            "coolload.api.main:app",
            host="0.0.0.0",
            port=8000,
            reload=config.DEBUG,
            log_level="debug" if config.DEBUG else "info"
        )
    except KeyboardInterrupt:
        print("\nServer stopped")
