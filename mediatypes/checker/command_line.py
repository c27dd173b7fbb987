import argparse
import logging
import os
from functools import partial

import requests
from colorama import init

from ..__version__ import __version__
from ..errors import HeaderFormatError
from ..headers import CONTENT_TYPE, header_values
from ..parser.lists import parse_list
from .result import CaptureResult

log = logging.getLogger(__name__)

parser = argparse.ArgumentParser(description='Check HTTP media type header values')

parser.add_argument('header_values', metavar='HEADER_VALUE', nargs='*',
                    help='a Content-Type or Accept style header value; all values given are checked as one list')

parser.add_argument('-u', '--url', default=None,
                    help='fetch this URL and check the Content-Type of the response')

parser.add_argument('--get', default=False, action='store_true',
                    help='fetch the URL with GET rather than HEAD')

parser.add_argument('-a', '--accept', metavar='PATTERN', action='append', default=None,
                    help='media types to accept, eg "text/*;q=0.5". May be specified multiple times; '
                         'may also be provided in MEDIATYPES_ACCEPT environment variable')

parser.add_argument('-v', '--verbose', default=False, action='store_true',
                    help='output more information about the check')

parser.add_argument('-q', '--quiet', default=False, action='store_true',
                    help='output less information about the check')

parser.add_argument('-V', '--version', default=False, action='version', version=f'%(prog)s {__version__}')


def main(argv=None):
    init(autoreset=True)
    args = parser.parse_args(argv)
    if not args.header_values and not args.url:
        print('Nothing to check: give header values or --url')
        return 1
    try:
        patterns = get_accept_patterns(args)
    except HeaderFormatError as e:
        print(f'Invalid accept pattern: {e}')
        return 1
    result_factory = partial(CaptureResult, level=get_log_level(args))
    success = True
    if args.header_values:
        success = check_header_values(', '.join(args.header_values), args.header_values, patterns, result_factory())
    if args.url:
        try:
            values = fetch_header_values(args.url, args.get)
        except requests.RequestException as e:
            print(f'Unable to fetch {args.url}: {e}')
            success = False
        else:
            success = check_header_values(args.url, values, patterns, result_factory(), single=True) and success
    return int(not success)


def get_log_level(args):
    if args.quiet:
        result_log_level = logging.WARNING
    elif args.verbose:
        result_log_level = logging.DEBUG
    else:
        result_log_level = logging.INFO
    return result_log_level


def get_accept_patterns(args):
    patterns = args.accept
    if not patterns:
        patterns = [os.environ.get('MEDIATYPES_ACCEPT', '')]
    return parse_list(patterns)


def fetch_header_values(url, use_get=False):
    fetch = requests.get if use_get else requests.head
    response = fetch(url, allow_redirects=True)
    log.debug(f'{url} responded {response.status_code} with headers {response.headers}')
    return header_values(response, CONTENT_TYPE)


def check_header_values(subject, values, patterns, result, single=False):
    result.start(subject)
    try:
        try:
            media_types = parse_list(values)
        except HeaderFormatError as e:
            return result.fail(f'Malformed header value: {e}')
        if not media_types:
            return result.fail('No media types found')
        if single and len(media_types) > 1:
            result.warn(f'{CONTENT_TYPE} should hold a single media type, got {len(media_types)}')
        for media_type in media_types:
            log.info(f'Parsed {media_type}')
            check_acceptable(media_type, patterns, result)
        return result.success
    finally:
        result.end()


def check_acceptable(media_type, patterns, result):
    if not patterns:
        return True
    for pattern in patterns:
        if media_type.is_subset_of(pattern):
            log.debug(f'{media_type} is acceptable under {pattern}')
            return True
    return result.fail(f'{media_type} is not acceptable under {", ".join(str(p) for p in patterns)}')


if __name__ == '__main__':
    import sys
    sys.exit(main())
