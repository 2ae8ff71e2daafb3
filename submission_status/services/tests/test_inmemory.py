"""Tests for :mod:`submission_status.services.inmemory`."""

from unittest import TestCase

from flask import Flask

from ...domain import Submission, SubmissionStatus, Deposit, DepositStatus, \
    EntityType
from ..exceptions import NoSuchResource, UpdateConflict
from ..inmemory import InMemoryRecordStore


class TestCreateAndRead(TestCase):
    """Records go in and come back out."""

    def setUp(self):
        """Start with an empty store."""
        self.store = InMemoryRecordStore()

    def test_create_mints_id(self):
        """An id and a version tag are assigned on creation."""
        identifier = self.store.create_resource(
            Submission(repositories=['repo:1'])
        )
        self.assertTrue(identifier.startswith('memory:/submissions/'))
        submission = self.store.read_resource(identifier,
                                              EntityType.SUBMISSION)
        self.assertEqual(submission.id, identifier)
        self.assertEqual(submission.repositories, ['repo:1'])
        self.assertIsNotNone(submission.version_tag)

    def test_create_keeps_id(self):
        """An existing id is kept, and may not be used twice."""
        identifier = self.store.create_resource(Submission(id='sub:1'))
        self.assertEqual(identifier, 'sub:1')
        with self.assertRaises(ValueError):
            self.store.create_resource(Submission(id='sub:1'))

    def test_reads_are_copies(self):
        """Changing a record that was read does not change the store."""
        identifier = self.store.create_resource(Submission())
        first = self.store.read_resource(identifier, EntityType.SUBMISSION)
        first.status = SubmissionStatus.CANCELLED
        second = self.store.read_resource(identifier, EntityType.SUBMISSION)
        self.assertIsNone(second.status)

    def test_read_missing(self):
        """Reading something that is not there fails."""
        with self.assertRaises(NoSuchResource):
            self.store.read_resource('nope', EntityType.DEPOSIT)

    def test_read_wrong_type(self):
        """Records are kept apart by type."""
        identifier = self.store.create_resource(Deposit())
        with self.assertRaises(NoSuchResource):
            self.store.read_resource(identifier, EntityType.SUBMISSION)

    def test_read_bad_arguments(self):
        """Both the id and the entity type are required."""
        with self.assertRaises(ValueError):
            self.store.read_resource(None, EntityType.DEPOSIT)
        with self.assertRaises(ValueError):
            self.store.read_resource('foo', 'Deposit')

    def test_delete(self):
        """Deleted records are gone."""
        identifier = self.store.create_resource(Deposit())
        self.store.delete_resource(identifier)
        with self.assertRaises(NoSuchResource):
            self.store.read_resource(identifier, EntityType.DEPOSIT)
        with self.assertRaises(NoSuchResource):
            self.store.delete_resource(identifier)


class TestUpdate(TestCase):
    """Updates are checked against the version tag."""

    def setUp(self):
        """Store one submission."""
        self.store = InMemoryRecordStore()
        self.identifier = self.store.create_resource(Submission())

    def test_update(self):
        """An update with a current version tag goes through."""
        submission = self.store.read_resource(self.identifier,
                                              EntityType.SUBMISSION)
        submission.status = SubmissionStatus.MANUSCRIPT_REQUIRED
        self.store.update_resource(submission)
        stored = self.store.read_resource(self.identifier,
                                          EntityType.SUBMISSION)
        self.assertEqual(stored.status, SubmissionStatus.MANUSCRIPT_REQUIRED)
        self.assertNotEqual(stored.version_tag, submission.version_tag,
                            "Each write gets a new version tag")

    def test_stale_update(self):
        """An update based on an old read is refused."""
        first = self.store.read_resource(self.identifier,
                                         EntityType.SUBMISSION)
        second = self.store.read_resource(self.identifier,
                                          EntityType.SUBMISSION)
        first.status = SubmissionStatus.CANCELLED
        self.store.update_resource(first)

        second.status = SubmissionStatus.APPROVAL_REQUESTED
        with self.assertRaises(UpdateConflict):
            self.store.update_resource(second)
        stored = self.store.read_resource(self.identifier,
                                          EntityType.SUBMISSION)
        self.assertEqual(stored.status, SubmissionStatus.CANCELLED)

    def test_update_without_version_tag(self):
        """Without a version tag there is no conflict check."""
        first = self.store.read_resource(self.identifier,
                                         EntityType.SUBMISSION)
        self.store.update_resource(first)
        blind = Submission(id=self.identifier,
                           status=SubmissionStatus.CANCELLED)
        self.store.update_resource(blind)
        stored = self.store.read_resource(self.identifier,
                                          EntityType.SUBMISSION)
        self.assertEqual(stored.status, SubmissionStatus.CANCELLED)

    def test_update_missing(self):
        """Records must exist, and have an id, to be updated."""
        with self.assertRaises(NoSuchResource):
            self.store.update_resource(Submission(id='nope'))
        with self.assertRaises(ValueError):
            self.store.update_resource(Submission())
        with self.assertRaises(ValueError):
            self.store.update_resource(None)


class TestFindAllByAttribute(TestCase):
    """Search records by attribute value."""

    def setUp(self):
        """Store a few deposits and submissions."""
        self.store = InMemoryRecordStore(default_limit=3)
        self.deposits = {
            self.store.create_resource(
                Deposit(submission='sub:1', repository=f'repo:{i}',
                        status=DepositStatus.SUBMITTED)
            )
            for i in range(4)
        }
        self.other = self.store.create_resource(
            Deposit(submission='sub:2', repository='repo:0',
                    status=DepositStatus.REJECTED)
        )
        self.submission = self.store.create_resource(
            Submission(id='sub:1', repositories=['repo:0', 'repo:1'])
        )

    def test_find_by_scalar(self):
        """Matches on equality."""
        found = self.store.find_all_by_attribute(EntityType.DEPOSIT,
                                                 'submission', 'sub:2')
        self.assertEqual(found, {self.other})

    def test_find_by_enum(self):
        """Enum values match by member or by wire value."""
        found = self.store.find_all_by_attribute(EntityType.DEPOSIT, 'status',
                                                 DepositStatus.REJECTED)
        self.assertEqual(found, {self.other})
        found = self.store.find_all_by_attribute(EntityType.DEPOSIT, 'status',
                                                 'rejected')
        self.assertEqual(found, {self.other})

    def test_find_in_list(self):
        """List attributes match on membership."""
        found = self.store.find_all_by_attribute(EntityType.SUBMISSION,
                                                 'repositories', 'repo:1')
        self.assertEqual(found, {self.submission})

    def test_no_match(self):
        """No match gives an empty set."""
        self.assertEqual(
            self.store.find_all_by_attribute(EntityType.DEPOSIT, 'submission',
                                             'sub:99'),
            set()
        )
        self.assertEqual(
            self.store.find_all_by_attribute(EntityType.DEPOSIT, 'nonesuch',
                                             'sub:1'),
            set()
        )

    def test_default_limit(self):
        """The default cap applies without an explicit limit."""
        found = self.store.find_all_by_attribute(EntityType.DEPOSIT,
                                                 'submission', 'sub:1')
        self.assertEqual(len(found), 3)
        self.assertTrue(found.issubset(self.deposits))

    def test_limit_and_offset(self):
        """Pages through the matches."""
        first = self.store.find_all_by_attribute(
            EntityType.DEPOSIT, 'submission', 'sub:1', limit=2, offset=0
        )
        second = self.store.find_all_by_attribute(
            EntityType.DEPOSIT, 'submission', 'sub:1', limit=2, offset=2
        )
        self.assertEqual(len(first), 2)
        self.assertEqual(len(second), 2)
        self.assertEqual(first | second, self.deposits)

    def test_bad_arguments(self):
        """Malformed searches are refused."""
        with self.assertRaises(ValueError):
            self.store.find_all_by_attribute(EntityType.DEPOSIT, 'submission',
                                             ['sub:1', 'sub:2'])
        with self.assertRaises(ValueError):
            self.store.find_all_by_attribute(EntityType.DEPOSIT, 'submission',
                                             {'sub:1'})
        with self.assertRaises(ValueError):
            self.store.find_all_by_attribute(EntityType.DEPOSIT, 'submission',
                                             None)
        with self.assertRaises(ValueError):
            self.store.find_all_by_attribute(EntityType.DEPOSIT, '', 'sub:1')
        with self.assertRaises(ValueError):
            self.store.find_all_by_attribute('Deposit', 'submission', 'sub:1')
        with self.assertRaises(ValueError):
            self.store.find_all_by_attribute(EntityType.DEPOSIT, 'submission',
                                             'sub:1', limit=-1)
        with self.assertRaises(ValueError):
            self.store.find_all_by_attribute(EntityType.DEPOSIT, 'submission',
                                             'sub:1', offset=-1)


class TestConfiguration(TestCase):
    """The store is configured from the application."""

    def test_get_session(self):
        """Config values are used to build the store."""
        app = Flask('test')
        app.config['PASS_SEARCH_LIMIT'] = '7'
        app.config['PASS_BASE_URI'] = 'https://pass.example.org/fcrepo/'
        with app.app_context():
            InMemoryRecordStore.init_app(app)
            store = InMemoryRecordStore.get_session(app)
        self.assertEqual(store.default_limit, 7)
        identifier = store.create_resource(Deposit())
        self.assertTrue(
            identifier.startswith('https://pass.example.org/fcrepo/deposits/')
        )

    def test_defaults(self):
        """Defaults are filled in by ``init_app``."""
        app = Flask('test')
        with app.app_context():
            InMemoryRecordStore.init_app(app)
            self.assertEqual(app.config['PASS_SEARCH_LIMIT'], '200')
            store = InMemoryRecordStore.get_session(app)
        self.assertEqual(store.default_limit, 200)
