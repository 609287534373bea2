"""
Core services - extraction heuristics and synthesis building blocks.
"""
from .logger import StructuredLogger, StructuredFormatter, get_logger
from .id_sequence import IdSequence
from .pattern_classifier import PatternClassifier, classify_priority, classify_nfr_type
from .section_locator import SectionLocator, locate_section
from .list_item_extractor import (
    RegexListItemExtractor,
    NumberedItemExtractor,
    BulletItemExtractor,
    CombinedItemExtractor,
    ChainedItemExtractor,
)
from .requirement_extractor import RequirementExtractor, extract_requirements
from .scenario_catalog import (
    BoundaryScenario,
    NegativeScenario,
    PerformanceScenario,
    SecurityScenario,
    Scenario,
    ScenarioCatalog,
    BOUNDARY_CATALOG,
    NEGATIVE_CATALOG,
    PERFORMANCE_CATALOG,
    SECURITY_CATALOG,
)

__all__ = [
    # Logging
    'StructuredLogger',
    'StructuredFormatter',
    'get_logger',
    # Extraction
    'PatternClassifier',
    'classify_priority',
    'classify_nfr_type',
    'SectionLocator',
    'locate_section',
    'RegexListItemExtractor',
    'NumberedItemExtractor',
    'BulletItemExtractor',
    'CombinedItemExtractor',
    'ChainedItemExtractor',
    'RequirementExtractor',
    'extract_requirements',
    # Synthesis
    'IdSequence',
    'BoundaryScenario',
    'NegativeScenario',
    'PerformanceScenario',
    'SecurityScenario',
    'Scenario',
    'ScenarioCatalog',
    'BOUNDARY_CATALOG',
    'NEGATIVE_CATALOG',
    'PERFORMANCE_CATALOG',
    'SECURITY_CATALOG',
]
