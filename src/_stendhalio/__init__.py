"""
Implementation of stendhalio, see the stendhalio package for the public api.
"""
