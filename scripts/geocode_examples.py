# Script that runs the convenience lookups against the live API
from argparse import ArgumentParser
import json
import logging

from geocoding_api import Geocode, GeocodingError

EXAMPLES = {
    'by_address': [
        ('25 Old Gardens Close Tunbridge Wells TN2 5ND', 'GB'),
        ('Les Houches', 'FR'),
        ('Chamonix - Les Houches', 'FR'),
        ('Chamonix - Centre', 'FR'),
    ],
    'by_postcode': [
        ('07001', 'ES'),
        ('SW1E 5ND', 'GB'),
    ],
    'by_lat_long': [
        ('43.549543', '7.014364', 'FR'),
        ('39.513047', '2.538872', 'ES'),
        ('43.549543', '7.014364'),
        (43.549543, 7.014364),
        ('50.88916732998306', '-0.5768395884825535'),
    ],
}

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    parser = ArgumentParser()
    parser.add_argument('--api-key', '-k', type=str, default=None, help='Defaults to GEOCODING_API_KEY')
    parser.add_argument('--method', '-m', choices=sorted(EXAMPLES), nargs='+', default=sorted(EXAMPLES))
    args = parser.parse_args()

    geocode = Geocode(api_key=args.api_key)

    for method_name in args.method:
        for i, arg_list in enumerate(EXAMPLES[method_name]):
            call = f"{method_name}({', '.join(repr(a) for a in arg_list)})"
            try:
                coordinates = getattr(geocode, method_name)(*arg_list)
            except GeocodingError as e:
                print(f'#{i} {call} => {type(e).__name__}: {e}')
                continue
            print(f'#{i} {call} => {json.dumps(coordinates.to_dict(), indent=2)}')
