"""
Unit tests for the requirement-to-test-case pipeline.

Test modules:
- test_domain: Tests for requirement and test case records
- test_generation_options: Tests for option parsing and validation
- test_pattern_classifier: Tests for keyword classification
- test_section_locator: Tests for heading-delimited sections
- test_list_item_extractor: Tests for list item strategies
- test_requirement_extractor: Tests for requirement extraction
- test_scenario_catalog: Tests for canned scenario templates
- test_generate_test_cases: Tests for test case synthesis
- test_config: Tests for environment and profile configuration
- test_logger: Tests for structured logging
- unit/: Tests for decoders, exporters and the CLI
"""
