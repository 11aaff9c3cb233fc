"""
Script to run the API locally.
Run with: python run_server.py
"""
import os

import uvicorn
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def main():
    """Main function to start the server."""
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "3000"))
    print(f"Starting server on http://{host}:{port} ...")
    uvicorn.run("app.main:app", host=host, port=port, reload=os.getenv("RELOAD") == "1")


if __name__ == "__main__":
    main()
