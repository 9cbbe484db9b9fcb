"""Launch the FastAPI app with uvicorn (optional helper)."""
from __future__ import annotations
import os

import uvicorn

def main() -> None:
    host = os.getenv("BIZNAME_HOST", "127.0.0.1")
    port = int(os.getenv("BIZNAME_PORT", "8000"))
    uvicorn.run("bizname_generator.serve.fastapi_app:app", host=host, port=port)

if __name__ == "__main__":
    main()
