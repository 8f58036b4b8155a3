from .scoring import POLICY_IDS, AccuracyPolicy, ScoringPolicy, SpeedPolicy, make_policy

__all__ = [
    "POLICY_IDS",
    "AccuracyPolicy",
    "ScoringPolicy",
    "SpeedPolicy",
    "make_policy",
]
