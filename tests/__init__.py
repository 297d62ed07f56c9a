"""
saas_starter test suite
=======================

Test Modules
------------
- test_models.py: Name validation, templates, requests and settings
- test_generator.py: Collision guard, template copy, manifest rename, install
- test_cli.py: Prompts, output and the interactive command

Running Tests
-------------
    # Run all tests
    pytest

    # Run specific module
    pytest tests/test_generator.py

    # Run specific test class
    pytest tests/test_generator.py::TestCreateProject
"""
