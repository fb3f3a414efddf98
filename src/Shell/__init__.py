"""
Command line shell for the file path library.
"""
