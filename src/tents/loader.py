import json
import os
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from .model import TentConfig
from .parser import parse_puzzle

TEXT_KEYS = ("puzzle_text", "text", "input")


def load_puzzle(file_path: str) -> TentConfig:
    """Read a single puzzle text file and build its initial configuration."""
    with open(file_path, "r", encoding="utf-8") as f:
        return parse_puzzle(f.read())


def load_puzzles(file_path: str) -> List[Dict[str, Any]]:
    """
    Reads puzzle records from a file. Handles plain puzzle text, .json, .jsonl
    and .parquet datasets.
    Returns a list of {"id", "puzzle"} dictionaries; "puzzle" holds puzzle text.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    def _extract_puzzle_text(record: Dict[str, Any]) -> str:
        value = record.get("puzzle")
        if isinstance(value, str) and value.strip():
            return value
        for key in TEXT_KEYS:
            value = record.get(key)
            if isinstance(value, str) and value.strip():
                return value
        return ""

    def _normalize_records(records: List[Any]) -> List[Dict[str, Any]]:
        normalized = []
        for idx, record in enumerate(records):
            if not isinstance(record, dict):
                continue
            pid = record.get("id")
            normalized.append({
                **record,
                "id": str(pid) if pid not in (None, "") else f"row_{idx}",
                "puzzle": _extract_puzzle_text(record),
            })
        return normalized

    def _read_json_lines() -> List[Any]:
        data = []
        with open(file_path, "r", encoding="utf-8") as f:
            for line in f:
                if not line.strip():
                    continue
                try:
                    data.append(json.loads(line))
                except json.JSONDecodeError:
                    continue
        return data

    suffix = Path(file_path).suffix.lower()

    # Case 1: Parquet File (Binary)
    if suffix == ".parquet":
        try:
            df = pd.read_parquet(file_path)
        except Exception as e:
            print(f"Error reading parquet: {e}")
            return []
        return _normalize_records(df.to_dict(orient="records"))

    # Case 2: JSON File (array or object)
    if suffix == ".json":
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except json.JSONDecodeError:
            # Some sources use ".json" but actually store JSONL.
            return _normalize_records(_read_json_lines())
        if isinstance(payload, dict):
            payload = [payload]
        if not isinstance(payload, list):
            return []
        return _normalize_records(payload)

    # Case 3: JSONL File
    if suffix == ".jsonl":
        return _normalize_records(_read_json_lines())

    # Case 4: a single puzzle in the plain text format
    with open(file_path, "r", encoding="utf-8") as f:
        text = f.read()
    return [{"id": Path(file_path).stem, "puzzle": text}]
