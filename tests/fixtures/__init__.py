"""Test fixtures for StepWise.

This package provides reusable test fixtures:
- api: Sample API store, HTTP target and workflow context fixtures
- sample_workflows: Requests, responses and steps for the sample API
"""
