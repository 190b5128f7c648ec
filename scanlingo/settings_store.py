"""
ScanLingo — Settings Store (SQLAlchemy)
========================================
Persists user preferences as one JSON row per profile:

    user_preferences — profile_id, payload (JSON), updated_at

Design notes:
  - Stored payloads are merged over the canonical defaults, so fields added
    later get their default value instead of breaking old rows.
  - get() never raises: a DB outage or a corrupt row yields the defaults
    (logged as a warning). set() and reset() do raise, so a caller knows
    its change was not saved.
  - The pipeline only reads `text_language` from here; everything else is
    carried for the clients that own those switches.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from loguru import logger
from pydantic import BaseModel, ValidationError
from sqlalchemy import JSON, Column, DateTime, String, create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from scanlingo.config import get_settings

DEFAULT_PROFILE = "default"


# ── Preferences model ─────────────────────────────────────────────────────────

class UserPreferences(BaseModel):
    enable_tts: bool = True
    text_language: str = "en"
    text_simplification: bool = True
    dark_mode: bool = False
    auto_save: bool = True
    font_size: Literal["small", "medium", "large"] = "medium"
    vibration_feedback: bool = True
    auto_translate: bool = False


# ── ORM ───────────────────────────────────────────────────────────────────────

class _SettingsBase(DeclarativeBase):
    pass


class PreferencesRow(_SettingsBase):
    __tablename__ = "user_preferences"

    profile_id = Column(String(64), primary_key=True)
    payload    = Column(JSON, nullable=False, default=dict)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


# ── Store ─────────────────────────────────────────────────────────────────────

class SettingsStore:
    def __init__(self, database_url: Optional[str] = None, profile_id: str = DEFAULT_PROFILE):
        url = database_url or get_settings().database_url
        self.profile_id = profile_id
        # sync routes run in a threadpool; sqlite connections are thread-bound by default
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        self._engine = create_engine(url, pool_pre_ping=True, echo=False, connect_args=connect_args)
        self._Session = sessionmaker(bind=self._engine, autoflush=False, autocommit=False)

    def init_db(self) -> bool:
        """Create the table if missing (additive, never drops)."""
        try:
            _SettingsBase.metadata.create_all(bind=self._engine)
            logger.info("[Settings] Table ready (user_preferences).")
            return True
        except Exception as e:
            logger.warning(f"[Settings] DB init failed (non-fatal): {e}")
            return False

    def get(self) -> UserPreferences:
        try:
            with self._Session() as db:
                row = db.get(PreferencesRow, self.profile_id)
                stored = dict(row.payload or {}) if row else {}
            return UserPreferences(**{**UserPreferences().model_dump(), **stored})
        except ValidationError as e:
            logger.warning(f"[Settings] Stored preferences invalid, using defaults: {e}")
        except Exception as e:
            logger.warning(f"[Settings] Could not load preferences, using defaults: {e}")
        return UserPreferences()

    def set(self, preferences: UserPreferences) -> None:
        payload = preferences.model_dump()
        with self._Session() as db:
            row = db.get(PreferencesRow, self.profile_id)
            if row is None:
                db.add(PreferencesRow(profile_id=self.profile_id, payload=payload))
            else:
                row.payload = payload
            db.commit()
        logger.info(f"[Settings] Saved preferences for profile={self.profile_id!r}")

    def reset(self) -> UserPreferences:
        with self._Session() as db:
            row = db.get(PreferencesRow, self.profile_id)
            if row is not None:
                db.delete(row)
                db.commit()
        logger.info(f"[Settings] Reset preferences for profile={self.profile_id!r}")
        return UserPreferences()

    def dispose(self) -> None:
        self._engine.dispose()
