"""
AdvisorService wire contract
"""
