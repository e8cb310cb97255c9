"""Command-line interface for the SPK generator."""

import argparse
import logging
import mimetypes
import sys
from pathlib import Path

from .config import Config
from .errors import SPKError
from .generator import SPKGenerator


def parse_arguments(argv=None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description='Generate a Surat Perintah Kerja (SPK) image.'
    )

    parser.add_argument(
        '--config',
        default='configs/config.yaml',
        help='Path to configuration file (default: configs/config.yaml)'
    )

    parser.add_argument('--name', help='Worker name')
    parser.add_argument('--job-detail', help='Job description (use \\n for line breaks)')
    parser.add_argument('--salary', help='Contract value, digits only or formatted')
    parser.add_argument('--deadline', help='Deadline as YYYY-MM-DD')

    parser.add_argument(
        '--signature',
        help='Path to a signature image to store before generating'
    )

    parser.add_argument(
        '--output-dir',
        help='Directory for the generated PNG (overrides config)'
    )

    parser.add_argument(
        '--reset-counter',
        action='store_true',
        help='Reset the SPK number to 0001'
    )

    return parser.parse_args(argv)


def _directory_sink(output_dir: Path):
    """Download sink writing each file directly into output_dir."""
    def deliver(filename: str, png_bytes: bytes) -> None:
        root = output_dir.resolve()
        target = (root / filename).resolve()
        if target.parent != root:
            raise ValueError(f"Refusing to write outside {root}: {filename!r}")
        root.mkdir(parents=True, exist_ok=True)
        target.write_bytes(png_bytes)
    return deliver


def main(argv=None) -> int:
    """Main entry point for the CLI.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = parse_arguments(argv)

    try:
        config = Config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        print(f"Please ensure the configuration file exists at: {args.config}")
        return 1

    try:
        generator = SPKGenerator.from_config(config)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if args.reset_counter:
        generator.reset_counter()
        print("Nomor SPK berhasil direset ke 0001")

    try:
        if args.signature:
            signature_path = Path(args.signature)
            content_type, _ = mimetypes.guess_type(signature_path.name)
            generator.upload_signature(signature_path.name, content_type, signature_path.read_bytes())
            print("Tanda tangan berhasil disimpan")

        fields = {
            'name': args.name,
            'job_detail': args.job_detail.replace('\\n', '\n') if args.job_detail else None,
            'salary_amount': args.salary,
            'deadline': args.deadline,
        }
        if not any(fields.values()) and (args.reset_counter or args.signature):
            return 0

        for field, value in fields.items():
            generator.update_field(field, value or "")

        output_dir = Path(args.output_dir) if args.output_dir else config.output_dir
        result = generator.generate_document(_directory_sink(output_dir))
    except SPKError as e:
        print(f"Error: {e}")
        return 1
    except (OSError, ValueError) as e:
        logging.exception("Error generating SPK")
        print(f"Error: {e}")
        return 1

    print(f"SPK nomor {result.document_number:04d} berhasil di-generate: {output_dir / result.filename}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
