"""Notification service command line.

Usage:
    notification-service serve --port 8080
    notification-service mail apply-tpl -f ~/templates/welcome_en.yml
    notification-service mail del-tpl -n welcome_en
    notification-service mail list-tpl [-t NEXT_TOKEN]
    notification-service mail detail-tpl -n welcome_en
    notification-service mail send -n welcome_en --to a@example.com --data "name=John&age=30"
"""

import argparse
import json
import sys
from typing import Dict, List, Optional

import uvicorn

from infrastructure.identity.models import Info
from infrastructure.logging import get_module_logger
from infrastructure.notifications.exceptions import NotificationError, ValidationError
from infrastructure.notifications.models import Notification
from infrastructure.services import get_sender, get_template_service
from infrastructure.templates.models import split_template_name

logger = get_module_logger()

CLI_SENDER_SUB = "cli"


def parse_data(raw: Optional[str]) -> Dict[str, str]:
    """Parse ``key=value&key2=value2``. Pairs without ``=`` are ignored."""
    data: Dict[str, str] = {}
    if not raw:
        return data
    for pair in raw.split("&"):
        key, sep, value = pair.partition("=")
        if sep:
            data[key] = value
    return data


def build_cli_notification(
    template_name: str, to: List[str], data: Dict[str, str]
) -> Notification:
    if not to:
        raise ValidationError("--to is required")
    event, lang = split_template_name(template_name)
    return Notification(
        event=event,
        lang=lang,
        sender=Info(sub=CLI_SENDER_SUB),
        recipients=[Info(sub=email, email=email) for email in to],
        data=data,
    )


def cmd_serve(args) -> int:
    uvicorn.run("main:server_app", host=args.host, port=args.port)
    return 0


def cmd_apply_tpl(args) -> int:
    template = get_template_service().apply(args.file)
    print(f"template {template.name} applied")
    return 0


def cmd_del_tpl(args) -> int:
    get_template_service().delete(args.name)
    print(f"template {args.name} deleted")
    return 0


def cmd_list_tpl(args) -> int:
    page = get_template_service().list(args.next_token or None)
    print(page.model_dump_json(indent=2))
    return 0


def cmd_detail_tpl(args) -> int:
    template = get_template_service().detail(args.name)
    print(json.dumps(template.model_dump(), indent=2, ensure_ascii=False))
    return 0


def cmd_send(args) -> int:
    notification = build_cli_notification(args.name, args.to, parse_data(args.data))
    message_id = get_sender().send(notification)
    print(f"Email sent successfully. Message ID: {message_id}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notification-service", description="Notification dispatch service"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="0.0.0.0")
    serve_parser.add_argument("--port", type=int, default=8080)
    serve_parser.set_defaults(func=cmd_serve)

    mail_parser = subparsers.add_parser("mail", help="Mail templates and test sends")
    mail_subparsers = mail_parser.add_subparsers(dest="mail_command", required=True)

    apply_parser = mail_subparsers.add_parser(
        "apply-tpl", help="Create or update a template from a YAML file"
    )
    apply_parser.add_argument("-f", "--file", required=True, help="template file (YAML)")
    apply_parser.set_defaults(func=cmd_apply_tpl)

    del_parser = mail_subparsers.add_parser("del-tpl", help="Delete a template")
    del_parser.add_argument("-n", "--name", required=True, help="template name")
    del_parser.set_defaults(func=cmd_del_tpl)

    list_parser = mail_subparsers.add_parser("list-tpl", help="List templates")
    list_parser.add_argument("-t", "--next-token", default="", help="next token")
    list_parser.set_defaults(func=cmd_list_tpl)

    detail_parser = mail_subparsers.add_parser("detail-tpl", help="Show a template")
    detail_parser.add_argument("-n", "--name", required=True, help="template name")
    detail_parser.set_defaults(func=cmd_detail_tpl)

    send_parser = mail_subparsers.add_parser(
        "send", help="Send an email with the configured mail provider"
    )
    send_parser.add_argument(
        "-n", "--name", required=True, help="template name, <event>_<lang>"
    )
    send_parser.add_argument(
        "--to",
        action="append",
        required=True,
        help="recipient email address (can be specified multiple times)",
    )
    send_parser.add_argument(
        "--data",
        default="",
        help="template data, key=value pairs separated by & (name=John&age=30)",
    )
    send_parser.set_defaults(func=cmd_send)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except NotificationError as e:
        logger.error("cli_command_failed", command=args.command, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
