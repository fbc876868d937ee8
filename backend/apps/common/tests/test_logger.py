import logging
import unittest
from decimal import Decimal

from apps.common.logger import AppLogger, get_logger


class AppLoggerTests(unittest.TestCase):
    def test_bind_returns_new_logger_with_merged_context(self):
        base = get_logger('apps.tests').bind(component='pricing')
        child = base.bind(view='QuoteView')
        self.assertEqual(base.context, {'component': 'pricing'})
        self.assertEqual(child.context, {'component': 'pricing', 'view': 'QuoteView'})

    def test_format_renders_money_and_sets_plainly(self):
        line = AppLogger._format(
            'Computed cart totals',
            {'total': Decimal('3.5E+2'), 'categories': {'Home', 'Electronics'}, 'cached': True},
        )
        self.assertEqual(
            line,
            'Computed cart totals | total=350 categories=[Electronics,Home] cached=True',
        )

    def test_message_without_context_is_unchanged(self):
        self.assertEqual(AppLogger._format('Liveness probe served', {}), 'Liveness probe served')

    def test_records_are_emitted_with_context(self):
        log = get_logger('apps.tests.logger').bind(cart_id='abc')
        with self.assertLogs('apps.tests.logger', level='INFO') as captured:
            log.info('Cart created', items=0)
            log.debug('hidden')
        self.assertEqual(len(captured.records), 1)
        self.assertIn('Cart created | cart_id=abc items=0', captured.output[0])
        self.assertEqual(captured.records[0].levelno, logging.INFO)
