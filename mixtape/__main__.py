# ============================================================================
# FILE: mixtape/__main__.py
# ============================================================================
import uvicorn
from mixtape.config import settings

def main():
    uvicorn.run("mixtape.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)

if __name__ == "__main__":
    main()
