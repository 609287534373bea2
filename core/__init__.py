"""
Requirement extraction and test case synthesis core.
"""
