import csv
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import pandas as pd


class CSVLoader:
    def load(
        self,
        path: str,
        *,
        sep: Optional[str] = None,
        encoding: str = "utf-8-sig",
        **kwargs,
    ) -> pd.DataFrame:
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"CSV file not found: {path}")

        delimiter = sep or self._detect_delimiter(file_path, encoding)
        return pd.read_csv(file_path, sep=delimiter, encoding=encoding, **kwargs)

    def load_entities(
        self,
        path: str,
        id_column: str,
        *,
        sep: Optional[str] = None,
        encoding: str = "utf-8-sig",
        **kwargs,
    ) -> Dict[str, Dict[str, Any]]:
        df = self.load(path, sep=sep, encoding=encoding, dtype={id_column: str}, **kwargs)
        return frame_to_entities(df, id_column)

    def peek_columns(self, path: Path, encoding: str = "utf-8-sig") -> Sequence[str]:
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"CSV file not found: {path}")
        delimiter = self._detect_delimiter(file_path, encoding)
        with file_path.open("r", encoding=encoding, errors="ignore") as f:
            reader = csv.reader(f, delimiter=delimiter)
            row = next(reader, [])
        return row

    def _detect_delimiter(self, path: Path, encoding: str) -> str:
        sample_size = 2048
        with path.open("r", encoding=encoding, errors="ignore") as f:
            sample = f.read(sample_size)
        if not sample:
            return ","
        try:
            dialect = csv.Sniffer().sniff(sample)
            return dialect.delimiter
        except csv.Error:
            return "|" if "|" in sample else ","


def frame_to_entities(df: pd.DataFrame, id_column: str) -> Dict[str, Dict[str, Any]]:
    """id 컬럼 기준 {id: {column: value}} 로 변환. 빈 셀은 None."""
    if id_column not in df.columns:
        raise ValueError(f"ID column not found: {id_column}")
    ids = df[id_column]
    if ids.isna().any():
        raise ValueError(f"Empty identifier in column: {id_column}")
    duplicated = ids[ids.duplicated()].unique().tolist()
    if duplicated:
        raise ValueError(f"Duplicate identifiers in {id_column}: {duplicated}")

    cleaned = df.astype(object).where(pd.notna(df), None)
    records = cleaned.drop(columns=[id_column]).to_dict(orient="records")
    return {str(key): record for key, record in zip(ids, records)}
