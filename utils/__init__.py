"""
Console and logging utilities shared by the service and the lifecycle tools.
"""
