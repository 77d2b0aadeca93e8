from decimal import Decimal, InvalidOperation

from django.core.management.base import BaseCommand, CommandError

from apps.exchange.domain.exceptions import ConversionError
from apps.exchange.domain.services import ConversionService


class Command(BaseCommand):
    help = 'Convert an amount between two currencies and store the transaction'

    def add_arguments(self, parser):
        parser.add_argument(
            '--from',
            dest='from_currency',
            type=str,
            required=True,
            help='Source currency code (e.g. USD)'
        )
        parser.add_argument(
            '--to',
            dest='to_currency',
            type=str,
            required=True,
            help='Target currency code (e.g. EUR)'
        )
        parser.add_argument(
            '--amount',
            type=str,
            help='Amount to convert (required unless --rate-only)'
        )
        parser.add_argument(
            '--rate-only',
            action='store_true',
            help='Only print the live exchange rate, do not store a transaction'
        )

    def handle(self, **options):
        from_currency = options['from_currency']
        to_currency = options['to_currency']

        try:
            service = ConversionService()

            if options['rate_only']:
                rate = service.get_exchange_rate(from_currency, to_currency)
                if rate is None:
                    raise CommandError(f'No exchange rate quoted for {from_currency}/{to_currency}')
                self.stdout.write(self.style.SUCCESS(f'{from_currency.upper()}/{to_currency.upper()}: {rate}'))
                return

            if options['amount'] is None:
                raise CommandError('--amount is required unless --rate-only is given')

            try:
                amount = Decimal(options['amount'])
            except InvalidOperation:
                raise CommandError('Invalid amount. Must be a number')

            record = service.convert(amount, from_currency, to_currency)
        except ConversionError as e:
            raise CommandError(f'Failed: {e}')

        self.stdout.write(
            self.style.SUCCESS(
                f'{record.original_amount} {record.from_currency} = '
                f'{record.converted_amount} {record.to_currency} (rate {record.rate})'
            )
        )
        self.stdout.write(f'Transaction ID: {record.transaction_id}')
