"""Infrastructure modules for the notification service.

Centralized infrastructure components:
- configuration: Settings management (Settings and its sections)
- logging: Structured logging (get_module_logger, bind_request_context)
- operations: Operation results and error classification
- identity: Identity service resolution (IdentityResolver, ClassificationLang)
- templates: Email templates, template stores and TemplateService
- notifications: Senders and the NotificationDispatcher
- health: Readiness tracking
- clients: AWS client helpers
- services: Dependency injection services (SettingsDep, get_settings)
"""
