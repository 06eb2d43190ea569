"""Batch pipeline decoding a file of digit sequences."""

import json
import logging
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Optional

import pandas as pd
from tqdm import tqdm

from .config import Config, DecoderConfig
from .errors import InvalidInputError
from .models import DecodingResult
from .segmenter import Segmenter

logger = logging.getLogger(__name__)

FULL_FILE_NAME = "messages.csv"


def parse_record(line: str, is_jsonl: bool) -> tuple[Optional[str], str]:
    """Extract (sequence_id, digits) from one input line.

    JSONL records carry the sequence under "digits" and an optional "id".
    Plain text lines are the digit sequence itself.

    Raises:
        json.JSONDecodeError: For malformed JSONL lines
        InvalidInputError: For JSON values that are not objects
    """
    if not is_jsonl:
        return None, line
    record = json.loads(line)
    if not isinstance(record, dict):
        raise InvalidInputError(f"Expected a JSON object, got {type(record).__name__}")
    digits = record.get("digits")
    if digits is None:
        digits = ""
    sequence_id = record.get("id")
    return (str(sequence_id) if sequence_id is not None else None), str(digits)


def result_to_rows(
    result: DecodingResult,
    line_num: int,
    sequence_id: Optional[str],
    include_groupings: bool = True,
) -> list[dict]:
    """Flatten a DecodingResult into CSV rows."""
    rows = []
    for order, message in enumerate(result.messages, 1):
        row = {
            "Source_Line_Number": line_num,
            "Sequence_ID": sequence_id,
            "Digits": result.digits,
            "Message_Order": order,
            "Message": message.text,
            "Num_Groups": message.num_groups,
        }
        if include_groupings:
            row["Grouping"] = message.grouping
        rows.append(row)
    return rows


def _process_record_worker(args: tuple) -> tuple[int, list[dict], bool]:
    """Worker for parallel processing. Must be module-level for pickling.

    Args:
        args: (line_num, sequence_id, digits, decoder_config_dict, include_groupings)

    Returns:
        (line_num, list of row dicts, truncated)
    """
    line_num, sequence_id, digits, decoder_config, include_groupings = args
    segmenter = Segmenter(DecoderConfig(**decoder_config))
    result = segmenter.decode(digits)
    return line_num, result_to_rows(result, line_num, sequence_id, include_groupings), result.truncated


class DecodingPipeline:
    """Pipeline for decoding every digit sequence in a file."""

    def __init__(self, config: Config):
        """Initialize decoding pipeline.

        Args:
            config: Pipeline configuration
        """
        self.config = config
        self.segmenter = Segmenter(config.decoder)
        self.skipped_lines: list[int] = []
        self.truncated_lines: list[int] = []

    def _setup_output_dirs(self) -> tuple[Path, Path]:
        """Create output directories based on configuration.

        Returns:
            Tuple of (full_files_dir, single_lines_dir)
        """
        policy_subfolder = self.config.decoder.zero_policy
        full_dir = self.config.output.output_dir / policy_subfolder / "Full_Files"
        single_dir = self.config.output.output_dir / policy_subfolder / "Single_Lines"

        if self.config.output.save_full_files:
            full_dir.mkdir(parents=True, exist_ok=True)
        if self.config.output.save_single_lines:
            single_dir.mkdir(parents=True, exist_ok=True)

        return full_dir, single_dir

    def process_line(
        self, digits: str, line_num: int, sequence_id: Optional[str] = None
    ) -> list[dict]:
        """Decode one digit sequence into CSV rows.

        Raises:
            InvalidInputError: If the sequence cannot be decoded
        """
        result = self.segmenter.decode(digits)
        if result.truncated:
            self.truncated_lines.append(line_num)
        return result_to_rows(
            result, line_num, sequence_id, self.config.output.include_groupings
        )

    def _read_tasks(self, input_path: Path) -> list[tuple[int, Optional[str], str]]:
        """Read (line_num, sequence_id, digits) for every non-blank line."""
        is_jsonl = input_path.suffix.lower() == ".jsonl"
        tasks = []
        with open(input_path, "r", encoding="utf-8") as infile:
            for line_num, line in enumerate(infile, 1):
                line = line.strip()
                if not line:
                    continue
                try:
                    sequence_id, digits = parse_record(line, is_jsonl)
                except json.JSONDecodeError:
                    logger.warning("Skipping malformed JSON at line %d", line_num)
                    self.skipped_lines.append(line_num)
                    continue
                except InvalidInputError as e:
                    logger.warning("Skipping line %d: %s", line_num, e)
                    self.skipped_lines.append(line_num)
                    continue
                tasks.append((line_num, sequence_id, digits))
        return tasks

    def _write_single_line(self, single_dir: Path, line_num: int, rows: list[dict]) -> None:
        pd.DataFrame(rows).to_csv(single_dir / f"Line_{line_num}.csv", index=False)

    def _process_file_sequential(self, tasks: list, single_dir: Path) -> dict[int, list[dict]]:
        """Process tasks in this process."""
        results_by_line = {}
        desc_text = f"Decoding ({self.config.decoder.engine} engine)"
        for line_num, sequence_id, digits in tqdm(tasks, desc=desc_text):
            try:
                rows = self.process_line(digits, line_num, sequence_id)
            except InvalidInputError as e:
                logger.warning("Skipping line %d: %s", line_num, e)
                self.skipped_lines.append(line_num)
                continue
            results_by_line[line_num] = rows
            if self.config.output.save_single_lines and rows:
                self._write_single_line(single_dir, line_num, rows)
        return results_by_line

    def _process_file_parallel(self, tasks: list, single_dir: Path) -> dict[int, list[dict]]:
        """Process tasks using multiple worker processes."""
        workers = self.config.decoder.workers
        decoder_config = self.config.decoder.model_dump()
        include_groupings = self.config.output.include_groupings
        desc_text = f"Decoding ({self.config.decoder.engine} engine, {workers} workers)"

        results_by_line = {}
        with ProcessPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(
                    _process_record_worker,
                    (line_num, sequence_id, digits, decoder_config, include_groupings),
                ): line_num
                for line_num, sequence_id, digits in tasks
            }
            for future in tqdm(as_completed(futures), total=len(futures), desc=desc_text):
                line_num = futures[future]
                try:
                    _, rows, truncated = future.result()
                except InvalidInputError as e:
                    logger.warning("Skipping line %d: %s", line_num, e)
                    self.skipped_lines.append(line_num)
                    continue
                results_by_line[line_num] = rows
                if truncated:
                    self.truncated_lines.append(line_num)

        # Sort and write single-line CSVs
        if self.config.output.save_single_lines:
            for line_num in sorted(results_by_line):
                if results_by_line[line_num]:
                    self._write_single_line(single_dir, line_num, results_by_line[line_num])

        return results_by_line

    def _save_full_file(self, full_dir: Path, results_by_line: dict[int, list[dict]]) -> Optional[Path]:
        """Save every row, ordered by source line, to one CSV."""
        if not self.config.output.save_full_files:
            return None
        rows = [row for line_num in sorted(results_by_line) for row in results_by_line[line_num]]
        columns = [
            "Source_Line_Number",
            "Sequence_ID",
            "Digits",
            "Message_Order",
            "Message",
            "Num_Groups",
        ]
        if self.config.output.include_groupings:
            columns.append("Grouping")
        save_path = full_dir / FULL_FILE_NAME
        pd.DataFrame(rows, columns=columns).to_csv(save_path, index=False)
        return save_path

    def process_file(self, input_path: Path) -> int:
        """Decode every sequence of a text or JSONL file.

        Args:
            input_path: Path to the input file

        Returns:
            Number of lines decoded
        """
        full_dir, single_dir = self._setup_output_dirs()
        self.skipped_lines = []
        self.truncated_lines = []
        print(f"Reading from: {input_path}")

        tasks = self._read_tasks(input_path)
        if self.config.decoder.workers <= 1:
            results_by_line = self._process_file_sequential(tasks, single_dir)
        else:
            results_by_line = self._process_file_parallel(tasks, single_dir)

        save_path = self._save_full_file(full_dir, results_by_line)

        message_count = sum(len(rows) for rows in results_by_line.values())
        print(f"\nDecoded {len(results_by_line)} sequences into {message_count} messages.")
        if self.skipped_lines:
            print(f"Skipped {len(self.skipped_lines)} invalid lines: {sorted(self.skipped_lines)}")
        if self.truncated_lines:
            print(
                f"Truncated output to {self.config.decoder.max_messages} messages "
                f"for lines: {sorted(self.truncated_lines)}"
            )
        if save_path is not None:
            print(f"Full file saved in: {save_path}")
        if self.config.output.save_single_lines:
            print(f"Individual line files saved in: {single_dir}")

        return len(results_by_line)

    def run(self) -> int:
        """Run the decoding pipeline.

        Returns:
            Number of lines decoded
        """
        if not self.config.input_file:
            raise ValueError("Input file not specified in configuration")

        if not self.config.input_file.exists():
            raise FileNotFoundError(f"Input file not found: {self.config.input_file}")

        return self.process_file(self.config.input_file)
