from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class StoreConfig:
    data_dir: Path = Path(os.getenv("COLLEGE_MATCH_DATA_DIR", "data"))
    users_filename: str = "users.json"
    assessments_filename: str = "assessments.json"
    colleges_filename: str = "colleges.json"
    details_dirname: str = "colleges"

    @property
    def users_path(self) -> Path:
        return self.data_dir / self.users_filename

    @property
    def assessments_path(self) -> Path:
        return self.data_dir / self.assessments_filename

    @property
    def colleges_path(self) -> Path:
        return self.data_dir / self.colleges_filename

    def detail_path(self, identifier: str) -> Path:
        return self.data_dir / self.details_dirname / f"{identifier}.json"


DEFAULT_STORE_CONFIG = StoreConfig()
