from pathlib import Path
from typing import Dict
from dotenv import load_dotenv

# .env lives next to the package (backend/.env)
ENV_PATH = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=False)

import os
from pydantic import BaseModel

class Settings(BaseModel):
    DDS_ENDPOINT: str = os.getenv("DDS_ENDPOINT", "https://dds.myhuaweicloud.com")
    DDS_PROJECT_ID: str = os.getenv("DDS_PROJECT_ID", "")
    DDS_AUTH_TOKEN: str = os.getenv("DDS_AUTH_TOKEN", "")
    DDS_LANGUAGE: str = os.getenv("DDS_LANGUAGE", "en-us")
    DDS_TIMEOUT_SEC: float = float(os.getenv("DDS_TIMEOUT_SEC", "30"))
    DDS_LIST_PAGE_SIZE: int = int(os.getenv("DDS_LIST_PAGE_SIZE", "100"))
    DDS_LOG_LEVEL: str = os.getenv("DDS_LOG_LEVEL", "INFO")

    def base_url(self) -> str:
        """Service root for every DDS v3 path: {endpoint}/v3/{project_id}"""
        return f"{self.DDS_ENDPOINT.rstrip('/')}/v3/{self.DDS_PROJECT_ID}"

    def default_headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "X-Language": self.DDS_LANGUAGE,
        }
        if self.DDS_AUTH_TOKEN:
            headers["X-Auth-Token"] = self.DDS_AUTH_TOKEN
        return headers

settings = Settings()
