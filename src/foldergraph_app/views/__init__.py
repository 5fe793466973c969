"""
Views for FolderGraph.
"""
