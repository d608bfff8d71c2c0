from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class IngestionConfig:
    """
    Configuration for the catalog ingestion job.
    """

    source_csv: Path = Path("recipe_finder/data/raw/recipes.csv")
    processed_data_dir: Path = Path("recipe_finder/data")
    processed_filename: str = "recipes.json"

    @property
    def processed_path(self) -> Path:
        return self.processed_data_dir / self.processed_filename


DEFAULT_INGESTION_CONFIG = IngestionConfig()
