"""
API server package: HTTP interface to the analysis pipeline.

Maps requests to AnalysisOrchestrator.analyze and errors to HTTP status codes.
"""
