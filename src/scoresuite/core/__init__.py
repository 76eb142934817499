"""
Core execution and reporting logic for scoresuite.
"""
