"""
Component Tests
"""
