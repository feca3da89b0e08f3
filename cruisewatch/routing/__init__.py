"""cruisewatch event routing — delivers monitor events to subscribed listeners.

Each ``ProjectMonitor`` owns one ``EventStream`` per event kind (polled,
build occurred, message received).  Streams dispatch synchronously on the
polling thread and isolate listener failures from the poll cycle.
"""
