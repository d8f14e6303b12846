"""Platform-specific source implementations.

Each subpackage registers its source factory with SourceRegistry on import.
"""
