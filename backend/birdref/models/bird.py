"""
BirdRef Backend — Bird SQLAlchemy Model
=========================================

What:  ORM model describing the `birds` table.
Why:   The table is provisioned outside this service; this model is the
       in-code record of its columns. The bird service derives its INSERT and
       UPDATE column lists from it, and tests create the table from it.

Table Design:
    - formatted_com_name: whitespace-free common name, primary key, never updated
    - com_name: the only other NOT NULL column
    - everything else: nullable TEXT with no cross-field constraints
"""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from birdref.database import Base


class BirdRecord(Base):
    """One row of the bird reference dataset."""

    __tablename__ = "birds"

    # ── Names ─────────────────────────────────────────────────────────────
    formatted_com_name: Mapped[str] = mapped_column(Text, primary_key=True)
    com_name: Mapped[str] = mapped_column(Text, nullable=False)
    sci_name: Mapped[str | None] = mapped_column(Text, nullable=True)

    # ── Photos ────────────────────────────────────────────────────────────
    preview_photo: Mapped[str | None] = mapped_column(Text, nullable=True)
    male_breeding_photo: Mapped[str | None] = mapped_column(Text, nullable=True)
    male_nonbreeding_photo: Mapped[str | None] = mapped_column(Text, nullable=True)
    female_photo: Mapped[str | None] = mapped_column(Text, nullable=True)

    # ── Media & Text ──────────────────────────────────────────────────────
    sound: Mapped[str | None] = mapped_column(Text, nullable=True)
    short_desc: Mapped[str | None] = mapped_column(Text, nullable=True)
    long_desc: Mapped[str | None] = mapped_column(Text, nullable=True)
    how_to_find: Mapped[str | None] = mapped_column(Text, nullable=True)
    habitat: Mapped[str | None] = mapped_column(Text, nullable=True)
    learn_more_link: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<BirdRecord(formatted_com_name='{self.formatted_com_name}')>"


# Key column used by update/delete/lookup statements
KEY_COLUMN = "formatted_com_name"

# Column order as declared; drives INSERT and UPDATE statement construction
BIRD_COLUMNS = tuple(column.name for column in BirdRecord.__table__.columns)
MUTABLE_COLUMNS = tuple(name for name in BIRD_COLUMNS if name != KEY_COLUMN)
