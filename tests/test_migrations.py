"""마이그레이션 스크립트 테스트.

Alembic revision chain and column widths of the initial migration.
"""

from pathlib import Path

from alembic.config import Config
from alembic.script import ScriptDirectory

from catalog.models.literary import CODE_MAX_LENGTH, NAME_MAX_LENGTH, TITLE_MAX_LENGTH, Creator, Work

ROOT = Path(__file__).resolve().parent.parent


def _script_directory() -> ScriptDirectory:
    config = Config(str(ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(ROOT / "alembic"))
    return ScriptDirectory.from_config(config)


class TestRevisionChain:
    """리비전 체인 테스트."""

    def test_single_head(self):
        assert _script_directory().get_heads() == ["5f0c2e8a9d13"]

    def test_initial_revision_has_no_parent(self):
        script = _script_directory().get_revision("5f0c2e8a9d13")
        assert script.down_revision is None
        assert Path(script.path).name == "5f0c2e8a9d13_create_literary_tables.py"


class TestColumnWidths:
    """모델 컬럼 길이 테스트."""

    def test_model_lengths(self):
        assert Creator.__table__.c.full_name.type.length == NAME_MAX_LENGTH == 255
        assert Work.__table__.c.work_title.type.length == TITLE_MAX_LENGTH == 500
        assert Work.__table__.c.international_code.type.length == CODE_MAX_LENGTH == 255
