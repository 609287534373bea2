"""
Domain entities and value objects.
"""
from .errors import (
    Req2TestError,
    DecodeError,
    DocumentParseError,
    UnsupportedFormatError,
    GenerationError,
    OptionsValidationError,
)
from .requirements import (
    Priority,
    NFRType,
    RequirementItem,
    FunctionalRequirement,
    NonFunctionalRequirement,
    UserStory,
    Requirements,
    format_requirement_id,
    summarize,
)
from .test_case import TestType, TestCategory, TestStep, TestCase, number_steps, to_dicts
from .options import GenerationOptions
from .report import ReportMetadata, ReportStatistics, build_report

__all__ = [
    'Req2TestError',
    'DecodeError',
    'DocumentParseError',
    'UnsupportedFormatError',
    'GenerationError',
    'OptionsValidationError',
    'Priority',
    'NFRType',
    'RequirementItem',
    'FunctionalRequirement',
    'NonFunctionalRequirement',
    'UserStory',
    'Requirements',
    'format_requirement_id',
    'summarize',
    'TestType',
    'TestCategory',
    'TestStep',
    'TestCase',
    'number_steps',
    'to_dicts',
    'GenerationOptions',
    'ReportMetadata',
    'ReportStatistics',
    'build_report',
]
