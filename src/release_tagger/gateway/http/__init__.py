"""Authenticated JSON transport for the GitHub REST API.

Import from submodules:
- abc: HttpClient, HttpRequest
- real: RealHttpClient
- fake: FakeHttpClient
"""
