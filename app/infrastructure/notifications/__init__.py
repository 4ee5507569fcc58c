"""Notification dispatch.

Submodules:
    exceptions: NotificationError hierarchy with HTTP status codes
    models: request, notification and dispatch result models
    senders: mail provider senders (SES, SMTP) and their factory
    dispatcher: NotificationDispatcher orchestrating a request
    header: NotifyMessage, the X-Notify header written by upstream services

Import from the submodules directly, e.g.::

    from infrastructure.notifications.dispatcher import NotificationDispatcher
    from infrastructure.notifications.exceptions import NotificationError
"""
