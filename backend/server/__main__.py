"""Run the API locally: python -m server (from backend/)."""

import uvicorn

from server.config import IS_PRODUCTION, PORT

if __name__ == "__main__":
    uvicorn.run("server:app", host="0.0.0.0", port=PORT, reload=not IS_PRODUCTION)
