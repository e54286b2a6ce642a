"""
Blog app: security write-ups published by the team.

Public endpoints serve published posts with search, category and
featured filters; admin endpoints manage drafts, cover images and
publication state.
"""
