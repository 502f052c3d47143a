from pydantic import BaseModel
from dotenv import load_dotenv
import os

load_dotenv()

class Settings(BaseModel):
    ROOT: str = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    RESULTS: str = os.getenv("MFV_RESULTS") or os.path.join(ROOT, "results")

    LOG_LEVEL: str = os.getenv("MFV_LOG_LEVEL") or "INFO"

settings = Settings()
