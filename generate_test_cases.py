#!/usr/bin/env python3
"""
Requirement Document to Test Case CLI
Extracts requirements from a document and generates structured test cases.
"""
import argparse
import os
import sys
from collections import Counter
from typing import Dict, List, Optional

import yaml
from dotenv import load_dotenv
load_dotenv()

from core.application.use_cases import GenerateTestCasesUseCase, ParseDocumentUseCase
from core.config import AppConfig
from core.domain import DocumentParseError, GenerationError, ReportMetadata, TestCase, summarize
from core.services import RequirementExtractor, StructuredLogger
from infrastructure.export import CSVGenerator, HTMLReportGenerator, JSONGenerator


FORMATS = ('csv', 'json', 'html', 'both', 'all')


def _option_overrides(args: argparse.Namespace) -> Dict[str, Optional[object]]:
    """CLI flags that were actually given; None leaves the profile value."""
    def flag(enabled: bool) -> Optional[bool]:
        return True if (enabled or args.all) else None

    return {
        "priority": args.priority,
        "includeBoundaryTests": False if args.no_boundary else flag(False),
        "includeNegativeTests": flag(args.negative),
        "includePerformanceTests": flag(args.performance),
        "includeSecurityTests": flag(args.security),
    }


def _safe_name(title: str) -> str:
    safe = "".join(c if c.isalnum() or c in ' _-' else '_' for c in title)
    return safe.strip().replace(' ', '_')[:50] or "requirements"


def export_test_cases(
    test_cases: List[TestCase],
    output_dir: str,
    base_name: str,
    fmt: str,
    metadata: Optional[ReportMetadata] = None
) -> List[str]:
    """Write test cases in the requested formats.

    Args:
        test_cases: Generated test cases
        output_dir: Directory to save output files
        base_name: File name without extension
        fmt: csv, json, html, both (csv and json) or all
        metadata: Report header for the JSON and HTML reports

    Returns:
        Paths of the written files
    """
    generators = []
    if fmt in ('csv', 'both', 'all'):
        generators.append(CSVGenerator())
    if fmt in ('json', 'both', 'all'):
        generators.append(JSONGenerator())
    if fmt in ('html', 'all'):
        generators.append(HTMLReportGenerator())

    os.makedirs(output_dir, exist_ok=True)
    return [
        generator.generate(
            test_cases,
            os.path.join(output_dir, f"{base_name}_TEST_CASES{generator.extension}"),
            metadata
        )
        for generator in generators
    ]


def generate_from_document(args: argparse.Namespace) -> bool:
    """Run the full pipeline for one document.

    Args:
        args: Parsed command line arguments

    Returns:
        True if successful, False otherwise
    """
    try:
        app_config = AppConfig.load(args.profile)
    except GenerationError as e:
        print(f"ERROR: Invalid generation profile: {e}")
        return False
    except (OSError, yaml.YAMLError) as e:
        print(f"ERROR: Could not read profile {args.profile}: {e}")
        return False

    env = app_config.environment
    StructuredLogger().configure(level=env.logging_level, log_file=env.log_file)
    output_dir = args.output_dir or app_config.output.output_dir

    print(f"\n{'='*60}")
    print(f"Test Case Generation for {os.path.basename(args.document)}")
    print(f"{'='*60}\n")

    # Step 1: Parse the document
    print("Step 1: Extracting requirements...")
    parser = ParseDocumentUseCase(extractor=RequirementExtractor(min_item_length=env.min_item_length))
    try:
        requirements = parser.execute(args.document)
    except DocumentParseError as e:
        print(f"ERROR: {e}")
        return False

    for line in summarize(requirements):
        print(f"  {line}")

    if args.show_requirements:
        for fr in requirements.functional_requirements:
            print(f"    {fr.id} [{fr.priority.value if fr.priority else '-'}] {fr.description}")
        for nfr in requirements.non_functional_requirements:
            print(f"    {nfr.id} [{nfr.type.value}] {nfr.description}")
        for story in requirements.user_stories:
            print(f"    {story.id} {story.role} / {story.goal} / {story.benefit}")

    # Step 2: Generate test cases
    print("\nStep 2: Generating test cases...")
    use_case = GenerateTestCasesUseCase(
        default_options=app_config.generation,
        environment=env.test_environment
    )
    try:
        test_cases = use_case.execute(requirements, _option_overrides(args))
    except GenerationError as e:
        print(f"ERROR: {e}")
        return False

    print(f"  Generated {len(test_cases)} test cases")
    for category, count in Counter(tc.category.value for tc in test_cases).items():
        print(f"    {category}: {count}")

    # Step 3: Save outputs
    print("\nStep 3: Saving outputs...")
    base_name = _safe_name(requirements.title)
    try:
        paths = export_test_cases(
            test_cases, output_dir, base_name,
            args.format or app_config.output.format,
            ReportMetadata.for_requirements(requirements)
        )
    except OSError as e:
        print(f"ERROR: Failed to write output: {e}")
        return False

    print(f"\n{'='*60}")
    print("GENERATION COMPLETE")
    print(f"{'='*60}")
    print(f"  Project: {requirements.title}")
    print(f"  Test cases generated: {len(test_cases)}")
    print(f"  Output directory: {output_dir}")
    print("\nFiles created:")
    for path in paths:
        print(f"  - {os.path.basename(path)}")

    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate test cases from a requirement document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python generate_test_cases.py docs/requirements.md
  python generate_test_cases.py requirements.docx --all --format html
  python generate_test_cases.py srs.pdf --profile profiles/full.yaml --output-dir ./tests_out
        """
    )

    parser.add_argument(
        'document',
        help='Requirement document (.txt, .md, .html, .docx, .pdf)'
    )

    parser.add_argument(
        '--output-dir',
        type=str,
        default=None,
        help='Output directory for generated files (default: REQ2TEST_OUTPUT_DIR or output)'
    )

    parser.add_argument(
        '--format',
        type=str,
        choices=FORMATS,
        default=None,
        help='Output format; both is csv and json, all adds the html report (default: all)'
    )

    parser.add_argument(
        '--priority',
        type=str,
        choices=['high', 'medium', 'low'],
        default=None,
        help='Fallback priority for generated test cases'
    )

    parser.add_argument('--no-boundary', action='store_true', help='Skip boundary value tests')
    parser.add_argument('--negative', action='store_true', help='Include negative tests')
    parser.add_argument('--performance', action='store_true', help='Include performance tests')
    parser.add_argument('--security', action='store_true', help='Include security tests')
    parser.add_argument('--all', action='store_true', help='Include every optional test category')

    parser.add_argument(
        '--profile',
        type=str,
        default=None,
        help='YAML generation profile'
    )

    parser.add_argument(
        '--show-requirements',
        action='store_true',
        help='Print every extracted requirement'
    )

    return parser


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    success = generate_from_document(args)
    sys.exit(0 if success else 1)


if __name__ == '__main__':
    main()
