"""
Export infrastructure implementations.

Provides output generation for CSV, JSON and HTML test case reports.
"""
from .csv_generator import CSVGenerator, CSVConfig
from .json_generator import JSONGenerator
from .html_generator import HTMLReportGenerator

__all__ = [
    'CSVGenerator',
    'CSVConfig',
    'JSONGenerator',
    'HTMLReportGenerator',
]
