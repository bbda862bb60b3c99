"""tools

Analyzer adapters: subprocess plumbing (:mod:`tools.core_cmd`) and one
subpackage per analyzer (:mod:`tools.reek`).
"""
