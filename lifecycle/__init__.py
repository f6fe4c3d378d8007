"""
Service lifecycle tools

Modules:
- install: install macchanger, write the configuration, start the service
- uninstall: stop the service and remove its files
- configure: change interval, interfaces and the enabled flag
- status: show service state, configuration and recent log entries
"""
