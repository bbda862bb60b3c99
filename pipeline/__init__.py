"""pipeline

Orchestration layer: capability protocols, the analysis pipeline, settings
and the composition root.
"""
