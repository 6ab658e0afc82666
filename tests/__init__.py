"""
Test suite for PyFastResize package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for kernel tables, convolution passes and resizing
- Integration tests for complete image workflows (arrays, files, CLI)

Run with: pytest
"""
