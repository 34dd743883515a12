"""
SQLite хранилище рекорда.

Одна таблица ключ-значение, в ней одна запись: лучший счёт.
Ошибки базы не должны ронять игру: при чтении считаем рекорд нулём,
при записи возвращаем False и запоминаем ошибку.
Записанный рекорд только растёт: при записи берём максимум из старого и нового.
"""
import sqlite3

from config import DB_PATH, HIGH_SCORE_KEY


class HighScoreDatabase:
    def __init__(self, db_path=DB_PATH):
        self.db_path = db_path
        self.conn = None
        self.last_error = None

    def _connect(self):
        """Соединение открывается при первом обращении"""
        if self.conn is not None:
            return self.conn

        conn = sqlite3.connect(self.db_path)
        try:
            conn.execute('''
                CREATE TABLE IF NOT EXISTS settings (
                    key TEXT PRIMARY KEY,
                    value TEXT,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            ''')
        except sqlite3.Error:
            conn.close()
            raise
        self.conn = conn
        return conn

    def _fail(self, error):
        self.last_error = error
        # Следующий вызов переподключится
        self.close()

    def load(self, key=HIGH_SCORE_KEY):
        """Прочитать рекорд (нет записи или ошибка -> 0)"""
        try:
            row = self._connect().execute(
                'SELECT value FROM settings WHERE key = ?', (key,)
            ).fetchone()
        except sqlite3.Error as e:
            self._fail(e)
            print(f"Warning: could not read high score from {self.db_path}: {e}")
            return 0

        if row is None:
            return 0
        try:
            value = int(row[0])
        except (TypeError, ValueError):
            print(f"Warning: ignoring malformed high score {row[0]!r}")
            return 0
        return max(0, value)

    def save(self, value, key=HIGH_SCORE_KEY):
        """Записать рекорд (меньшее значение старое не затирает). True если получилось"""
        try:
            conn = self._connect()
            with conn:
                conn.execute('''
                    INSERT INTO settings (key, value, updated_at)
                    VALUES (?, ?, CURRENT_TIMESTAMP)
                    ON CONFLICT(key) DO UPDATE SET
                        value = MAX(CAST(settings.value AS INTEGER),
                                    CAST(excluded.value AS INTEGER)),
                        updated_at = excluded.updated_at
                ''', (key, str(int(value))))
        except sqlite3.Error as e:
            self._fail(e)
            print(f"Warning: could not save high score to {self.db_path}: {e}")
            return False

        self.last_error = None
        return True

    def close(self):
        """Закрыть соединение"""
        if self.conn is not None:
            self.conn.close()
            self.conn = None


class MemoryStore:
    """Рекорд в памяти (без файла) - для тестов и --no-save"""

    def __init__(self, value=0):
        self.value = value
        self.saves = 0

    def load(self, key=HIGH_SCORE_KEY):
        return self.value

    def save(self, value, key=HIGH_SCORE_KEY):
        self.value = max(self.value, value)
        self.saves += 1
        return True

    def close(self):
        pass
