# client.py

import argparse
from chatwidget import Interface, WidgetConfig

def main():
    parser = argparse.ArgumentParser(description='Chat widget')
    parser.add_argument('-e', '--endpoint',
        help='Responder URL (e.g., http://127.0.0.1:8000/chat)')
    parser.add_argument('--enable-logging',
        action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stdout)')
    parser.add_argument('--storage',
        default='./.chatwidget/storage.json',
        help='File holding the session id and message log')
    parser.add_argument('--speed',
        type=float, default=30,
        help='Milliseconds per revealed character')

    args = parser.parse_args()

    config = WidgetConfig(
        endpoint=args.endpoint,
        storage_path=args.storage,
        reveal_delay=args.speed / 1000,
    )
    chat = Interface(
        logging_enabled=args.enable_logging,
        log_file=args.log_file,
        config=config,
    )
    chat.start()

if __name__ == "__main__":
    main()
