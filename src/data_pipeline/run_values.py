"""Run the complete dynasty value pipeline.

Usage:
    python -m src.data_pipeline.run_values [data_dir] [settings_dir]

Examples:
    python -m src.data_pipeline.run_values
    python -m src.data_pipeline.run_values data/raw data/settings
"""

import json
import logging
import math
import sys
from datetime import datetime, timezone
from pathlib import Path

from src.data_pipeline.cleaning import DatasetCleaner
from src.data_pipeline.config import OUTPUT_FILENAME, PROCESSED_DATA_DIR, RAW_DATA_DIR
from src.data_pipeline.ingestion import DatasetIngester
from src.data_pipeline.value_table import ValueTableBuilder
from src.league_settings.persistence import SettingsPersistence
from src.league_settings.settings import LeagueSettings
from src.logging_config import setup_logging
from src.rookie_engine.ranking import assign_ranks
from src.rookie_engine.scoring import process_rookie_dataset
from src.value_engine.player_pool import PlayerPool
from src.value_engine.value_calculator import PlayerValueEngine

logger = logging.getLogger(__name__)


def _json_safe(value):
    """Replace NaN with None and unwrap numpy scalars for JSON output."""
    if hasattr(value, "item"):
        value = value.item()
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


def run_pipeline(
    data_dir: Path | None = None,
    settings_dir: Path | None = None,
    output_dir: Path | None = None,
    current_year: int | None = None,
) -> Path:
    """Value every player and score every rookie, writing one JSON file.

    Args:
        data_dir: Directory holding ``players`` and ``rookies`` datasets.
            Defaults to ``data/raw``.
        settings_dir: Directory holding saved league settings. Defaults to
            built-in default settings when omitted.
        output_dir: Directory for JSON output. Defaults to
            ``data/processed/``.
        current_year: Season used to discount future picks.

    Returns:
        Path to the generated JSON file.

    Raises:
        FileNotFoundError: If the data directory doesn't exist.
        RookieValidationError: If the rookie dataset is invalid.
    """
    data_dir = data_dir or RAW_DATA_DIR
    output_dir = output_dir or PROCESSED_DATA_DIR

    if not data_dir.is_dir():
        raise FileNotFoundError(f"Data directory not found: {data_dir}")

    if settings_dir is not None:
        settings = SettingsPersistence(settings_dir).load_settings()
    else:
        settings = LeagueSettings()

    logger.info("Starting value pipeline (data: %s)", data_dir)

    # 1. Ingest
    logger.info("Step 1/4: Reading datasets...")
    raw = DatasetIngester(data_dir).read_all()

    # 2. Clean
    logger.info("Step 2/4: Cleaning data...")
    cleaned = DatasetCleaner().clean_all(raw)

    # 3. Rookies
    logger.info("Step 3/4: Scoring rookies...")
    rookies = assign_ranks(process_rookie_dataset(cleaned["rookies"]), mode="all")

    # 4. Player values
    logger.info("Step 4/4: Valuing players...")
    engine = PlayerValueEngine(PlayerPool.from_records(cleaned["players"]), current_year)
    table = ValueTableBuilder(engine).build(settings)

    output_data = {
        "metadata": {
            "version": "1.0",
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "total_players": len(table),
            "total_rookies": len(rookies),
        },
        "settings": settings.to_dict(),
        "players": [
            {key: _json_safe(value) for key, value in row.items()}
            for row in table.to_dict(orient="records")
        ],
        "rookies": [
            {
                "id": r.rookie.id,
                "name": r.name,
                "year": r.year,
                "position": r.position,
                "school": r.school,
                "rank": r.rank,
                "overall": r.overall,
                "traitScore": r.trait_score,
                "measurablesScore": r.measurables_score,
                "breakdown": r.breakdown,
            }
            for r in rookies
        ],
    }

    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / OUTPUT_FILENAME
    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(output_data, f, indent=2)

    logger.info("Pipeline complete! Output: %s", output_file)
    logger.info("  Players: %d, rookies: %d", len(table), len(rookies))
    return output_file


if __name__ == "__main__":
    setup_logging()

    data_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    settings_dir = Path(sys.argv[2]) if len(sys.argv) > 2 else None

    try:
        output = run_pipeline(data_dir, settings_dir)
        print(f"Pipeline complete: {output}")
    except Exception:
        logger.exception("Pipeline failed")
        sys.exit(1)
