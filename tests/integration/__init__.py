"""
Integration Tests - End-to-End Pipeline Tests.

These tests run retrieve -> filter -> sort -> serialize over a
StaticRecordSource, so no network access is needed.

Test Files:
    - test_blog_pipeline.py: Full pipeline workflow and factory wiring
"""
