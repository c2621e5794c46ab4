"""
Route modules for the Shelter Trials API.
"""
