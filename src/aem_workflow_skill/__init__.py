"""aem-workflow-skill — install the AEM workflow skill into AI assistant tools."""

__version__ = "1.2.0"
