"""Convenience helpers for segmenting whole files of names."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import pandas as pd

try:
    from tqdm import tqdm

    _TQDM_AVAILABLE = True
except ImportError:  # pragma: no cover - optional dependency
    _TQDM_AVAILABLE = False

from .segmenter import NameSegmenter, SegmenterConfig
from .sources import load_word_list

_INPUT_SUFFIXES = {".csv", ".xls", ".xlsx", ".json"}


@dataclass
class SegmentationStats:
    """Summary metrics for a batch run."""

    total_names: int
    compound_count: int
    evaluated: int
    correct: int
    runtime_seconds: float

    @property
    def accuracy(self) -> float | None:
        if not self.evaluated:
            return None
        return self.correct / self.evaluated


@dataclass
class SegmentationResult:
    """Result bundle returned by :func:`segment_dataframe`."""

    dataframe: pd.DataFrame
    stats: SegmentationStats


@dataclass
class RunnerConfig:
    """Configuration parameters for batch segmentation."""

    name_column: str = "name"
    expected_columns: Optional[Tuple[str, str, str]] = None
    dictionary_paths: List[Path] = field(default_factory=list)
    given_names_path: Optional[Path] = None
    segmenter: SegmenterConfig = field(default_factory=SegmenterConfig)
    use_tqdm: bool | None = None
    verbose: bool = True

    @property
    def show_progress(self) -> bool:
        if self.use_tqdm is not None:
            return self.use_tqdm and _TQDM_AVAILABLE
        return _TQDM_AVAILABLE


def build_segmenter(config: RunnerConfig) -> NameSegmenter:
    """Load the configured word lists and construct a segmenter."""

    fix_encoding = config.segmenter.fix_encoding
    dictionaries = [load_word_list(path, fix_encoding=fix_encoding) for path in config.dictionary_paths]
    given_names = None
    if config.given_names_path:
        given_names = load_word_list(config.given_names_path, fix_encoding=fix_encoding)
    return NameSegmenter(dictionaries, given_names, config=config.segmenter)


def segment_dataframe(
    dataframe: pd.DataFrame,
    segmenter: NameSegmenter,
    config: RunnerConfig | None = None,
) -> SegmentationResult:
    """Segment every row of `dataframe` and return an enriched copy."""

    config = config or RunnerConfig()
    if config.name_column not in dataframe.columns:
        raise KeyError(f"Column '{config.name_column}' not found in dataframe")

    start = time.time()
    df = dataframe.copy()
    names = df[config.name_column].fillna("").astype(str).tolist()

    iterator: Iterable[str] = names
    if names and config.show_progress:
        iterator = tqdm(names, desc="   Segmenting", unit="name")
    parsed = [segmenter.parse(name) for name in iterator]

    df["given_name"] = [item.given_name for item in parsed]
    df["surname1"] = [item.surname1 for item in parsed]
    df["surname2"] = [item.surname2 for item in parsed]
    df["is_compound"] = [item.is_compound for item in parsed]
    df["natural"] = [item.to_natural() for item in parsed]
    df["standard"] = [item.to_standard() for item in parsed]
    df["full_hyphen"] = [item.to_full_hyphen() for item in parsed]

    evaluated = 0
    correct = 0
    if config.expected_columns is not None:
        missing = [column for column in config.expected_columns if column not in df.columns]
        if missing:
            raise KeyError(f"Expected columns not found in dataframe: {missing}")
        expected = [
            df[column].fillna("").astype(str).map(segmenter.normalize).tolist()
            for column in config.expected_columns
        ]
        flags = [
            (given, first, second) == (item.given_name, item.surname1, item.surname2)
            for item, given, first, second in zip(parsed, *expected)
        ]
        df["is_correct"] = flags
        evaluated = len(flags)
        correct = sum(flags)

    stats = SegmentationStats(
        total_names=len(df),
        compound_count=sum(item.is_compound for item in parsed),
        evaluated=evaluated,
        correct=correct,
        runtime_seconds=time.time() - start,
    )
    return SegmentationResult(dataframe=df, stats=stats)


def segment_file(
    input_path: str | Path,
    output_path: str | Path,
    config: Optional[RunnerConfig] = None,
) -> SegmentationResult | None:
    """Run the full workflow on `input_path` and write the annotated results."""

    input_path = Path(input_path)
    output_path = Path(output_path)
    config = config or RunnerConfig()

    if input_path.suffix.lower() not in _INPUT_SUFFIXES:
        print(f"ERROR: Unsupported file format for '{input_path}'. Please provide a CSV, Excel or JSON file.")
        return None

    try:
        dataframe = _load_dataframe(input_path)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{input_path}'.")
        return None
    except ValueError as exc:
        print(f"ERROR: Could not read '{input_path}': {exc}")
        return None

    if config.name_column not in dataframe.columns:
        print(f"ERROR: Column '{config.name_column}' not found in '{input_path}'. Please check --name-column.")
        return None

    try:
        segmenter = build_segmenter(config)
    except FileNotFoundError as exc:
        print(f"ERROR: Word list not found: {exc.filename}")
        return None
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return None

    if config.verbose:
        print("--- Name Segmenter Process Started ---")
        print(
            f"   Loaded {len(dataframe)} names, {len(segmenter.dictionary)} compound surnames "
            f"(up to {segmenter.dictionary.max_words} words)."
        )

    try:
        result = segment_dataframe(dataframe, segmenter, config)
        _save_dataframe(result.dataframe, output_path)
    except (KeyError, ValueError) as exc:
        print(f"ERROR: {exc}")
        return None

    if config.verbose:
        stats = result.stats
        print("\n--- Results Summary ---")
        print(f"   - Total names processed: {stats.total_names}")
        print(f"   - Names with compound surnames: {stats.compound_count}")
        if stats.accuracy is not None:
            print(f"   - Accuracy: {stats.correct}/{stats.evaluated} ({stats.accuracy:.4%})")
        print(f"\n   Processing complete. Results saved to '{output_path}'")
        print(f"--- Name Segmenter Process Finished in {stats.runtime_seconds:.2f} seconds ---")
    return result


def _load_dataframe(path: Path) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path, dtype=str)
    if suffix in {".xls", ".xlsx"}:
        return pd.read_excel(path, dtype=str)
    if suffix == ".json":
        return pd.read_json(path, orient="records", dtype=False)
    raise ValueError("unsupported format")


def _save_dataframe(dataframe: pd.DataFrame, output_path: Path) -> None:
    suffix = output_path.suffix.lower()
    if suffix == ".csv":
        dataframe.to_csv(output_path, index=False)
        return
    if suffix in {".xls", ".xlsx"}:
        dataframe.to_excel(output_path, index=False)
        return
    if suffix == ".json":
        dataframe.to_json(output_path, orient="records", force_ascii=False, indent=2)
        return
    raise ValueError(f"Unsupported output file format: '{suffix}'")
