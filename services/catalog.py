# Catalog Service: program documents from Firestore, or the bundled catalog
#
# Documents live in the PROGRAMS_COLLECTION collection, keyed by program id.
# Without a Firestore client the catalog keeps documents in memory, seeded
# from data/programs.py. Either way documents are validated into Program
# models on the way out; invalid documents are skipped when listing.

import copy
import logging
import uuid
from datetime import datetime, timezone
from functools import lru_cache
from typing import Dict, List, Optional

from pydantic import ValidationError

from config import PROGRAMS_COLLECTION, get_db
from data.programs import PROGRAMS
from models.schemas import Program

logger = logging.getLogger(__name__)


class ProgramCatalog:
    def __init__(self, db=None, seed: Optional[Dict[str, dict]] = None):
        self.db     = db
        self._local = copy.deepcopy(seed if seed is not None else PROGRAMS) if db is None else {}

    # ── Helpers ─────────────────────────────────────────────────────

    def _ref(self):
        return self.db.collection(PROGRAMS_COLLECTION)

    @staticmethod
    def _to_program(program_id: str, data: dict) -> Program:
        return Program.model_validate({**data, "id": program_id})

    def _documents(self):
        if self.db is None:
            return list(self._local.items())
        return [(doc.id, doc.to_dict() or {}) for doc in self._ref().stream()]

    # ── Public API ──────────────────────────────────────────────────

    def list_programs(self) -> List[Program]:
        programs = []
        for program_id, data in self._documents():
            try:
                programs.append(self._to_program(program_id, data))
            except ValidationError as exc:
                logger.warning(
                    "Skipping invalid program document %r: %d error(s)",
                    program_id, exc.error_count()
                )
        return programs

    def get_program(self, program_id: str) -> Optional[Program]:
        if self.db is None:
            data = self._local.get(program_id)
        else:
            doc  = self._ref().document(program_id).get()
            data = doc.to_dict() if doc.exists else None
        if data is None:
            return None
        try:
            return self._to_program(program_id, data)
        except ValidationError as exc:
            logger.warning(
                "Invalid program document %r: %d error(s)",
                program_id, exc.error_count()
            )
            return None

    def save_program(self, program: Program) -> Program:
        """Insert or replace a program document; stamps created_at/updated_at."""
        now    = datetime.now(timezone.utc)
        update = {"updated_at": now}
        if program.created_at is None:
            update["created_at"] = now
        if program.id is None:
            update["id"] = uuid.uuid4().hex if self.db is None else self._ref().document().id
        saved = program.model_copy(update=update)

        data = saved.model_dump(exclude={"id"})
        if self.db is None:
            self._local[saved.id] = data
        else:
            self._ref().document(saved.id).set(data)

        logger.info("Saved program %s (%s)", saved.id, saved.title)
        return saved


@lru_cache(maxsize=1)
def get_catalog() -> ProgramCatalog:
    """Process-wide catalog, Firestore-backed when credentials are present."""
    db = get_db()
    logger.info("Program catalog backend: %s", "firestore" if db is not None else "bundled")
    return ProgramCatalog(db=db)
