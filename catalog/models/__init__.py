"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations.

Modules:
    literary: 작가 및 작품 (Creator and Work)
"""

from catalog.models.literary import Creator, Work

__all__ = ["Creator", "Work"]
