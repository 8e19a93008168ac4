import logging
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)

DOWN_MARKER = "-- Down"


class SQLiteMigrator:
    """Applies ``migrations/*.sql`` in filename order, each at most once."""

    def __init__(self, db_path: str, migrations_dir: str):
        self.db_path = db_path
        self.migrations_dir = Path(migrations_dir)

    def run_migrations(self) -> list[str]:
        """Apply pending migrations. Returns the filenames applied by this call."""
        conn = sqlite3.connect(self.db_path)
        try:
            conn.execute(
                "CREATE TABLE IF NOT EXISTS _migrations ("
                "filename TEXT PRIMARY KEY, "
                "applied_at DATETIME DEFAULT CURRENT_TIMESTAMP)"
            )
            done = {row[0] for row in conn.execute("SELECT filename FROM _migrations")}
            pending = [p for p in sorted(self.migrations_dir.glob("*.sql")) if p.name not in done]
            for path in pending:
                logger.info("Applying migration: %s", path.name)
                self._apply(conn, path)
        finally:
            conn.close()
        return [p.name for p in pending]

    def _apply(self, conn: sqlite3.Connection, path: Path) -> None:
        # Only the part above the down marker is run
        script = path.read_text().split(DOWN_MARKER)[0]
        try:
            conn.executescript(script)
            conn.execute("INSERT INTO _migrations (filename) VALUES (?)", (path.name,))
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise RuntimeError(f"Migration {path.name} failed: {e}") from e
