#!/usr/bin/env python3
"""
Persistent best-attempt records, one per maze size
"""

import sqlite3
import json
import threading
import time
from contextlib import contextmanager


def best_key(cols, rows):
    return f"maze_best_{cols}x{rows}"


class BestScoreStore:
    def __init__(self, db_path='maze_best.db'):
        self.db_path = db_path
        self.lock = threading.Lock()
        self._init_database()

    def _init_database(self):
        """Initialize database tables"""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute('''
                CREATE TABLE IF NOT EXISTS best_scores (
                    size_key TEXT PRIMARY KEY,
                    maze_cols INTEGER NOT NULL,
                    maze_rows INTEGER NOT NULL,
                    record TEXT NOT NULL,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            ''')
            conn.commit()

    @contextmanager
    def _get_connection(self):
        """Get database connection with thread safety"""
        with self.lock:
            conn = sqlite3.connect(self.db_path, check_same_thread=False)
            conn.row_factory = sqlite3.Row
            try:
                yield conn
            finally:
                conn.close()

    def get_best(self, cols, rows):
        """Best record for a size, or None"""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute('SELECT record FROM best_scores WHERE size_key = ?',
                           (best_key(cols, rows),))
            row = cursor.fetchone()
            if row:
                return json.loads(row['record'])
            return None

    def submit(self, time_ms, moves, cols, rows, at=None):
        """Store the attempt if it beats the current best time; return True if stored"""
        record = {
            'time_ms': int(time_ms),
            'moves': int(moves),
            'cols': int(cols),
            'rows': int(rows),
            'at': int(at if at is not None else time.time() * 1000),
        }
        key = best_key(cols, rows)

        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute('SELECT record FROM best_scores WHERE size_key = ?', (key,))
            row = cursor.fetchone()
            if row and json.loads(row['record'])['time_ms'] <= record['time_ms']:
                return False

            cursor.execute('''
                INSERT OR REPLACE INTO best_scores (size_key, maze_cols, maze_rows, record, updated_at)
                VALUES (?, ?, ?, ?, CURRENT_TIMESTAMP)
            ''', (key, record['cols'], record['rows'], json.dumps(record)))
            conn.commit()
            return True

    def all_bests(self):
        """All stored records, smallest mazes first"""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute('SELECT record FROM best_scores ORDER BY maze_cols, maze_rows')
            return [json.loads(row['record']) for row in cursor.fetchall()]

    def clear(self, cols=None, rows=None):
        """Delete one size's record, or every record when no size is given"""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            if cols is None and rows is None:
                cursor.execute('DELETE FROM best_scores')
            else:
                cursor.execute('DELETE FROM best_scores WHERE size_key = ?',
                               (best_key(cols, rows),))
            deleted = cursor.rowcount
            conn.commit()
            return deleted
