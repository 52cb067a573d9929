"""
Aegis core package initialization.

Intent resolution (keyword lexicon, ambiguity scoring, recommendations) and
action safety (telemetry context injection, action tier classification).
"""
