"""
Source Code Root Module

This module serves as the root for the source code of the flight predictor.

Layer Structure:
- Domain: Forecast entities, prediction engine and fallback generator
- Application: Use cases and DTOs
- Infrastructure: Recent games HTTP gateway, poller and health checks
- Presentation: Controllers for the forecast and system endpoints
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
