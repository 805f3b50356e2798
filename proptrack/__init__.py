"""PropTrack - suivi de biens immobiliers"""

__version__ = "1.0.0"
