"""
Core Package.

Contains the resolution pipeline stages:
- Feature Gate
- Directive expansion and Override Merger
- Deduplicator
- Artifact Emitter
- Pipeline orchestration
"""
