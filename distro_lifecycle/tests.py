# Release lifecycle queries for Debian and Ubuntu series.
#
# Last Change: October 16, 2026

"""Test suite for the ``distro-lifecycle`` package."""

# Standard library modules.
import datetime
import logging
import os

# External dependencies.
from humanfriendly.testing import TemporaryDirectory, TestCase, run_cli

# Modules included in our package.
from distro_lifecycle import DistroInfo
from distro_lifecycle.backends import debian, ubuntu
from distro_lifecycle.cli import debian_main, ubuntu_main
from distro_lifecycle.releases import (
    BUNDLED_DATA_DIRECTORY,
    DuplicateKeyError,
    LoadError,
    MalformedError,
    SeriesRecord,
    dump,
    find_data_file,
    load,
    parse_csv_file,
    parse_date,
    parse_version,
)
from distro_lifecycle.status import (
    DEVEL,
    SUPPORTED,
    UNSUPPORTED,
    ConsistencyError,
    NotFoundError,
    evaluate,
    is_released,
    lifecycle_phase,
)

SCENARIO = """
version,codename,series,created,release,eol
1.0,alpha,ser1,2020-01-01,2020-06-01,2021-06-01
2.0,beta,ser2,2021-01-01,2021-06-01,
3.0,gamma,ser3,2022-01-01,,
""".strip().splitlines()
"""A small dataset with a released, a supported and an unreleased series."""

EXTENDED_SUPPORT = """
version,codename,series,created,release,eol,eol-server,eol-esm
1.04 LTS,Able Aardvark,able,2000-01-01,2000-04-01,2002-04-01,2004-04-01,2010-04-01
1.10,Baker Bear,baker,2000-04-01,2000-10-01,2001-07-01
2.04 LTS,Charlie Cat,charlie,2000-10-01,2001-04-01,2003-04-01
""".strip().splitlines()
"""A dataset with two LTS series, one of which doesn't have extended support dates."""

BUNDLED_UBUNTU = os.path.join(BUNDLED_DATA_DIRECTORY, 'ubuntu.csv')
BUNDLED_DEBIAN = os.path.join(BUNDLED_DATA_DIRECTORY, 'debian.csv')

# Initialize a logger for this module.
logger = logging.getLogger(__name__)


class DistroLifecycleTestCase(TestCase):

    """:mod:`unittest` compatible container for the :mod:`distro_lifecycle` test suite."""

    def test_load_dataset(self):
        """Test that a dataset is loaded field by field and in order."""
        records = load(SCENARIO)
        assert [r.series for r in records] == ['ser1', 'ser2', 'ser3']
        alpha, beta, gamma = records
        assert alpha.version == '1.0'
        assert alpha.codename == 'alpha'
        assert alpha.created == datetime.date(2020, 1, 1)
        assert alpha.release == datetime.date(2020, 6, 1)
        assert alpha.eol == datetime.date(2021, 6, 1)
        assert beta.eol is None
        assert gamma.release is None and gamma.eol is None
        assert [r.position for r in records] == [0, 1, 2]

    def test_load_explicit_columns(self):
        """Test that the column names can be given instead of being read from the first line."""
        records = load(SCENARIO[1:], columns=SCENARIO[0].split(','))
        assert [r.codename for r in records] == ['alpha', 'beta', 'gamma']

    def test_load_empty_dataset(self):
        """Test that an empty dataset results in an empty list."""
        assert load([]) == []
        assert load(SCENARIO[:1]) == []
        assert evaluate([], 'all', parse_date('2021-07-01')) == []
        self.assertRaises(NotFoundError, evaluate, [], 'latest', parse_date('2021-07-01'))

    def test_malformed_field_count(self):
        """Test that lines with too few or too many fields are rejected."""
        self.assertRaises(MalformedError, load, SCENARIO + ['4.0,delta,ser4'])
        self.assertRaises(MalformedError, load, SCENARIO + ['4.0,delta,ser4,2023-01-01,,,2030-01-01'])
        # Trailing empty fields may be omitted.
        records = load(SCENARIO + ['4.0,delta,ser4,2023-01-01'])
        assert records[-1].release is None

    def test_malformed_values(self):
        """Test that unparseable dates, versions and empty names are rejected."""
        with self.assertRaises(MalformedError) as context:
            load(SCENARIO + ['4.0,delta,ser4,2023-13-01'])
        assert ':5:' in str(context.exception)
        self.assertRaises(MalformedError, load, SCENARIO + ['4.0,delta,ser4,01/01/2023'])
        self.assertRaises(MalformedError, load, SCENARIO + ['four,delta,ser4,2023-01-01'])
        self.assertRaises(MalformedError, load, SCENARIO + ['4.0,,ser4,2023-01-01'])
        self.assertRaises(MalformedError, load, SCENARIO + ['4.0,delta,ser4,'])
        # Dates must be zero padded, otherwise dumping wouldn't reproduce the line.
        self.assertRaises(MalformedError, load, SCENARIO + ['4.0,delta,ser4,2023-1-1'])
        self.assertRaises(MalformedError, load, SCENARIO + ['4.0,delta,ser4,2023-01-01,2023-6-1'])
        self.assertRaises(ValueError, parse_date, '2020-1-1')

    def test_malformed_columns(self):
        """Test that datasets with unexpected column names are rejected."""
        self.assertRaises(MalformedError, load, ['codename,version,series,created,release,eol'])
        self.assertRaises(MalformedError, load, ['version,codename,series,created,release,eol,eol,eol-esm'])
        self.assertRaises(MalformedError, load, ['version,codename,series,created,release,eol,eol-lts,eol-server'])

    def test_duplicate_keys(self):
        """Test that duplicate series names, code names and versions are rejected."""
        self.assertRaises(DuplicateKeyError, load, SCENARIO + ['4.0,delta,ser1,2023-01-01'])
        self.assertRaises(DuplicateKeyError, load, SCENARIO + ['4.0,alpha,ser4,2023-01-01'])
        self.assertRaises(DuplicateKeyError, load, SCENARIO + ['1.0 LTS,delta,ser4,2023-01-01'])
        # Code names are unique regardless of case.
        self.assertRaises(DuplicateKeyError, load, SCENARIO + ['4.0,Alpha,ser4,2023-01-01'])
        # Both exception types share a base class.
        assert issubclass(DuplicateKeyError, LoadError)
        assert issubclass(MalformedError, LoadError)

    def test_version_ordering(self):
        """Test that versions are compared numerically instead of lexically."""
        assert parse_version('9.10') < parse_version('10.04')
        assert parse_version('6.06 LTS') < parse_version('6.10')
        assert parse_version('7') < parse_version('10')
        assert parse_version('') is None
        self.assertRaises(ValueError, parse_version, 'rawhide')
        records = load([
            'version,codename,series,created,release,eol',
            '9.10,Karmic Koala,karmic,2009-04-23,2009-10-29,2011-04-30',
            '10.04 LTS,Lucid Lynx,lucid,2009-10-29,2010-04-29,2013-05-09',
        ])
        # Lexically '10.04' < '9.10', numerically it's the other way around.
        assert evaluate(records, 'latest', parse_date('2010-06-01'))[0].series == 'lucid'
        assert evaluate(records, 'stable', parse_date('2010-06-01'))[0].series == 'lucid'

    def test_unnumbered_series_ordering(self):
        """Test that series without a version sort after numbered series, in dataset order."""
        records = load(['version,codename,series,created,release,eol',
                        ',Sid,sid,1993-08-16',
                        '1.1,Buzz,buzz,1993-08-16',
                        ',Experimental,experimental,1993-08-16'])
        ranked = sorted(records, key=lambda r: r.sort_key)
        assert [r.series for r in ranked] == ['buzz', 'sid', 'experimental']
        assert evaluate(records, 'devel', parse_date('1995-01-01'))[0].series == 'experimental'

    def test_scenario_queries(self):
        """Test the lifecycle predicates against a small dataset."""
        records = load(SCENARIO)
        as_of = parse_date('2021-07-01')
        assert series_of(evaluate(records, 'stable', as_of)) == ['ser2']
        assert series_of(evaluate(records, 'devel', as_of)) == ['ser3']
        assert series_of(evaluate(records, 'unsupported', as_of)) == ['ser1']
        assert series_of(evaluate(records, 'supported', as_of)) == ['ser2']
        assert series_of(evaluate(records, 'latest', as_of)) == ['ser2']

    def test_latest_fallback(self):
        """Test that ``latest`` falls back to created series and fails before anything was created."""
        records = load(SCENARIO)
        self.assertRaises(NotFoundError, evaluate, records, 'latest', parse_date('2019-01-01'))
        self.assertRaises(NotFoundError, evaluate, records, 'latest', parse_date('2019-12-31'))
        # Created but not released yet.
        assert series_of(evaluate(records, 'latest', parse_date('2020-01-01'))) == ['ser1']
        assert series_of(evaluate(records, 'latest', parse_date('2020-03-01'))) == ['ser1']
        # Nothing has been released before 2020-06-01, so there's no stable series.
        self.assertRaises(NotFoundError, evaluate, records, 'stable', parse_date('2020-01-01'))
        self.assertRaises(NotFoundError, evaluate, records, 'stable', parse_date('2020-05-31'))

    def test_inclusive_boundaries(self):
        """Test that release and EOL dates are inclusive."""
        records = load(SCENARIO)
        # Released on the release date.
        assert series_of(evaluate(records, 'stable', parse_date('2020-06-01'))) == ['ser1']
        assert series_of(evaluate(records, 'devel', parse_date('2020-05-31'))) == ['ser1']
        # Still supported on the EOL date.
        assert series_of(evaluate(records, 'supported', parse_date('2021-06-01'))) == ['ser1', 'ser2']
        assert series_of(evaluate(records, 'unsupported', parse_date('2021-06-01'))) == []
        assert series_of(evaluate(records, 'unsupported', parse_date('2021-06-02'))) == ['ser1']

    def test_all_ignores_date(self):
        """Test that ``all`` returns every record in dataset order regardless of the date."""
        records = load(SCENARIO)
        for text in ('1900-01-01', '2021-07-01', '2999-12-31'):
            assert evaluate(records, 'all', parse_date(text)) == records

    def test_absent_eol_is_not_unsupported(self):
        """Test that a missing EOL date never turns into an EOL in the past."""
        records = load(SCENARIO)
        as_of = parse_date('2099-01-01')
        assert series_of(evaluate(records, 'unsupported', as_of)) == ['ser1']
        assert series_of(evaluate(records, 'supported', as_of)) == ['ser2']
        # An unreleased series without dates is neither supported nor unsupported.
        assert lifecycle_phase(records[2], as_of) == DEVEL

    def test_stable_never_unreleased_or_expired(self):
        """Test that ``stable`` only ever selects released series within support."""
        records = load(SCENARIO + ['4.0,delta,ser4,2022-06-01,2023-01-01,2023-06-01'])
        for as_of in date_range('2019-12-01', '2024-01-01'):
            try:
                record = evaluate(records, 'stable', as_of)[0]
            except NotFoundError:
                continue
            assert is_released(record, as_of)
            assert record.eol is None or record.eol >= as_of

    def test_phases_are_monotonic(self):
        """Test that series only move forward through their lifecycle phases."""
        records = load(SCENARIO)
        order = [DEVEL, SUPPORTED, UNSUPPORTED]
        for record in records:
            phases = [order.index(lifecycle_phase(record, d)) for d in date_range('2019-12-01', '2023-01-01')]
            assert phases == sorted(phases)
        assert lifecycle_phase(records[0], parse_date('2020-05-31')) == DEVEL
        assert lifecycle_phase(records[0], parse_date('2020-06-01')) == SUPPORTED
        assert lifecycle_phase(records[0], parse_date('2021-06-02')) == UNSUPPORTED

    def test_devel_tie_breaks(self):
        """Test that ``devel`` prefers the nearest release date and then the greatest version."""
        as_of = parse_date('2021-07-01')
        # A scheduled release is nearer than an unscheduled one.
        records = load(SCENARIO + ['4.0,delta,ser4,2021-02-01,2021-10-01'])
        assert series_of(evaluate(records, 'devel', as_of)) == ['ser4']
        # Two series without release date: the greatest version wins.
        records = load(SCENARIO + ['4.0,delta,ser4,2021-02-01'])
        assert series_of(evaluate(records, 'devel', as_of)) == ['ser4']
        # Two series with the same release date: the greatest version wins.
        records = load(SCENARIO + ['3.5,delta,ser4,2021-02-01,2022-04-01', '3.6,epsilon,ser5,2021-02-01,2022-04-01'])
        assert series_of(evaluate(records, 'devel', as_of)) == ['ser5']
        # Nothing upcoming.
        records = load(SCENARIO[:3])
        self.assertRaises(NotFoundError, evaluate, records, 'devel', as_of)

    def test_consistency_error(self):
        """Test that records sharing a version can't be ranked."""
        records = [
            SeriesRecord(codename='One', series='one', version='1.0', created=parse_date('2020-01-01')),
            SeriesRecord(codename='Uno', series='uno', version='1.0', created=parse_date('2020-01-01')),
        ]
        self.assertRaises(ConsistencyError, evaluate, records, 'latest', parse_date('2020-02-01'))

    def test_unknown_predicate(self):
        """Test that unknown predicates are rejected."""
        self.assertRaises(ValueError, evaluate, load(SCENARIO), 'oldest', parse_date('2021-07-01'))

    def test_long_term_support(self):
        """Test the ``lts`` and ``extended`` predicates for series flagged as LTS."""
        records = load(EXTENDED_SUPPORT)
        able, baker, charlie = records
        assert able.is_lts and charlie.is_lts and not baker.is_lts
        assert able.eol_lts == datetime.date(2004, 4, 1)
        assert able.eol_esm == datetime.date(2010, 4, 1)
        # Charlie doesn't have extended dates so it's covered by its standard support.
        as_of = parse_date('2003-01-01')
        assert series_of(evaluate(records, 'lts', as_of)) == ['able', 'charlie']
        assert series_of(evaluate(records, 'extended', as_of)) == ['able', 'charlie']
        as_of = parse_date('2005-01-01')
        assert series_of(evaluate(records, 'lts', as_of)) == []
        assert series_of(evaluate(records, 'extended', as_of)) == ['able']
        # Boundaries are inclusive.
        assert series_of(evaluate(records, 'lts', parse_date('2004-04-01'))) == ['able']
        assert series_of(evaluate(records, 'extended', parse_date('2010-04-02'))) == []
        # Unreleased series are never covered.
        assert series_of(evaluate(records, 'lts', parse_date('2000-03-31'))) == []

    def test_extended_support_after_eol(self):
        """Test the ``lts`` and ``extended`` predicates for series that aren't flagged as LTS."""
        records = load([
            'version,codename,series,created,release,eol,eol-lts,eol-elts',
            '10,Buster,buster,2017-06-17,2019-07-06,2022-09-10,2024-06-30,2029-06-30',
        ])
        assert series_of(evaluate(records, 'lts', parse_date('2022-09-10'))) == []
        assert series_of(evaluate(records, 'lts', parse_date('2022-09-11'))) == ['buster']
        assert series_of(evaluate(records, 'lts', parse_date('2024-06-30'))) == ['buster']
        assert series_of(evaluate(records, 'lts', parse_date('2024-07-01'))) == []
        assert series_of(evaluate(records, 'extended', parse_date('2024-07-01'))) == ['buster']
        assert series_of(evaluate(records, 'extended', parse_date('2029-07-01'))) == []

    def test_dump_reproduces_bundled_files(self):
        """Test that loading and dumping the bundled CSV files gives back the original lines."""
        for filename, columns in ((BUNDLED_UBUNTU, ubuntu.COLUMNS), (BUNDLED_DEBIAN, debian.COLUMNS)):
            with open(filename, encoding='UTF-8') as handle:
                lines = handle.read().splitlines()
            assert dump(load(lines), columns) == lines

    def test_extra_dates(self):
        """Test that columns without a dedicated attribute are preserved."""
        trusty = find(parse_csv_file(BUNDLED_UBUNTU), 'trusty')
        assert trusty.extra_dates['eol-legacy'] == datetime.date(2026, 4, 28)
        assert trusty.get_date('eol-legacy') == datetime.date(2026, 4, 28)
        assert trusty.get_date('eol-server') == trusty.eol_lts
        self.assertRaises(ValueError, trusty.get_date, 'eol-unknown')

    def test_parse_csv_file(self):
        """Test that the distributor ID is derived from the filename."""
        records = parse_csv_file(BUNDLED_UBUNTU)
        warty = records[0]
        assert warty.distributor_id == 'ubuntu'
        assert warty.version == '4.10'
        assert warty.codename == 'Warty Warthog'
        assert warty.created == datetime.date(2004, 3, 5)
        assert warty.eol == datetime.date(2006, 4, 30)
        assert warty.eol_lts is None
        assert find(records, 'dapper').eol_lts == datetime.date(2011, 6, 1)
        assert str(find(records, 'bionic')) == 'Ubuntu 18.04 LTS (bionic)'
        assert find(records, 'bionic').full_name == 'Ubuntu 18.04 LTS "Bionic Beaver"'

    def test_find_data_file(self):
        """Test that system files are preferred over bundled files."""
        with TemporaryDirectory() as directory:
            assert find_data_file('ubuntu', directory) == BUNDLED_UBUNTU
            pathname = os.path.join(directory, 'ubuntu.csv')
            with open(pathname, 'w') as handle:
                handle.write('\n'.join(SCENARIO) + '\n')
            assert find_data_file('ubuntu', directory) == pathname
            distro_info = DistroInfo(distributor_id='ubuntu', data_directory=directory)
            assert series_of(distro_info.records) == ['ser1', 'ser2', 'ser3']
            self.assertRaises(EnvironmentError, find_data_file, 'gentoo', directory)

    def test_ubuntu_queries(self):
        """Test queries against the bundled Ubuntu data."""
        distro_info = DistroInfo(distributor_id='ubuntu', data_file=BUNDLED_UBUNTU)
        as_of = parse_date('2018-06-14')
        assert series_of(distro_info.evaluate('supported', as_of)) == ['trusty', 'xenial', 'artful', 'bionic']
        assert series_of(distro_info.evaluate('devel', as_of)) == ['cosmic']
        assert series_of(distro_info.evaluate('stable', as_of)) == ['bionic']
        assert series_of(distro_info.evaluate('latest', parse_date('2005-06-14'))) == ['hoary']
        as_of = parse_date('2026-10-16')
        assert series_of(distro_info.evaluate('lts', as_of)) == ['jammy', 'noble']
        assert series_of(distro_info.evaluate('esm', as_of)) == ['bionic', 'focal', 'jammy', 'noble']
        assert distro_info.evaluate('esm', as_of) == distro_info.evaluate('extended', as_of)
        self.assertRaises(ValueError, distro_info.evaluate, 'testing', as_of)
        self.assertRaises(ValueError, distro_info.alias, 'bionic')

    def test_ubuntu_find_series(self):
        """Test looking up Ubuntu series by name, code name and version."""
        distro_info = DistroInfo(distributor_id='ubuntu', data_file=BUNDLED_UBUNTU)
        assert distro_info.find_series('bionic').version == '18.04 LTS'
        assert distro_info.find_series('bionic beaver').series == 'bionic'
        assert distro_info.find_series('18.04').series == 'bionic'
        assert distro_info.find_series('9.10').series == 'karmic'
        self.assertRaises(NotFoundError, distro_info.find_series, 'bogus')
        self.assertRaises(NotFoundError, distro_info.find_series, '99.99')

    def test_days_until(self):
        """Test counting the days until a milestone."""
        distro_info = DistroInfo(distributor_id='ubuntu', data_file=BUNDLED_UBUNTU, as_of=parse_date('2018-04-20'))
        bionic = distro_info.find_series('bionic')
        assert distro_info.days_until(bionic, 'release') == 6
        assert distro_info.days_until(bionic, 'created') == -183
        assert distro_info.days_until(distro_info.find_series('warty'), 'eol-esm') is None
        self.assertRaises(ValueError, distro_info.days_until, bionic, 'eol-lts')

    def test_debian_queries(self):
        """Test queries against the bundled Debian data, including the Debian specific selectors."""
        distro_info = DistroInfo(distributor_id='debian', data_file=BUNDLED_DEBIAN)
        as_of = parse_date('2026-10-16')
        assert series_of(distro_info.evaluate('stable', as_of)) == ['trixie']
        assert series_of(distro_info.evaluate('oldstable', as_of)) == ['bookworm']
        assert series_of(distro_info.evaluate('testing', as_of)) == ['forky']
        assert series_of(distro_info.evaluate('devel', as_of)) == ['sid']
        assert series_of(distro_info.evaluate('lts', as_of)) == ['bookworm']
        assert series_of(distro_info.evaluate('elts', as_of)) == ['stretch', 'buster', 'bullseye', 'bookworm']
        assert series_of(distro_info.evaluate('testing', parse_date('2025-01-01'))) == ['trixie']
        self.assertRaises(NotFoundError, distro_info.evaluate, 'oldstable', parse_date('1996-07-01'))
        with self.assertRaises(NotFoundError) as context:
            distro_info.evaluate('oldstable', parse_date('1996-01-01'))
        assert 'oldstable' in str(context.exception)
        self.assertRaises(NotFoundError, distro_info.evaluate, 'devel', parse_date('1990-01-01'))
        self.assertRaises(ValueError, distro_info.evaluate, 'esm', as_of)

    def test_debian_aliases(self):
        """Test resolving the aliases of Debian series."""
        distro_info = DistroInfo(distributor_id='debian', data_file=BUNDLED_DEBIAN, as_of=parse_date('2026-10-16'))
        assert distro_info.alias('sid') == 'unstable'
        assert distro_info.alias('experimental') == 'experimental'
        assert distro_info.alias('forky') == 'testing'
        assert distro_info.alias('trixie') == 'stable'
        assert distro_info.alias('bookworm') == 'oldstable'
        assert distro_info.alias('buster') == 'buster'
        assert distro_info.alias('bookworm', parse_date('2024-01-01')) == 'stable'

    def test_unsupported_distributor(self):
        """Test that distributors without a backend are rejected."""
        distro_info = DistroInfo(distributor_id='gentoo', data_file=BUNDLED_UBUNTU)
        self.assertRaises(EnvironmentError, distro_info.evaluate, 'all')

    def test_cli_selectors(self):
        """Test the command line interface with the various selectors."""
        def run(*arguments):
            return run_cli(ubuntu_main, '--file=%s' % BUNDLED_UBUNTU, '--date=2018-06-14', *arguments)
        exit_code, output = run('--stable')
        assert exit_code == 0
        assert output.strip() == 'bionic'
        exit_code, output = run('--supported')
        assert output.split() == ['trusty', 'xenial', 'artful', 'bionic']
        exit_code, output = run('--devel')
        assert output.strip() == 'cosmic'
        exit_code, output = run('--series=xenial')
        assert output.strip() == 'xenial'
        exit_code, output = run('--all')
        assert len(output.split()) == len(parse_csv_file(BUNDLED_UBUNTU))

    def test_cli_output_modes(self):
        """Test the command line interface with the various output options."""
        def run(*arguments):
            return run_cli(ubuntu_main, '--file=%s' % BUNDLED_UBUNTU, '--date=2018-06-14', '--stable', *arguments)
        exit_code, output = run('--release')
        assert output.strip() == '18.04 LTS'
        exit_code, output = run('--fullname')
        assert output.strip() == 'Ubuntu 18.04 LTS "Bionic Beaver"'
        exit_code, output = run('--days=release')
        assert output.strip() == '-49'
        exit_code, output = run('--days=eol-legacy')
        assert output.strip() == '4338'
        exit_code, output = run('--table')
        assert exit_code == 0
        assert 'Bionic Beaver' in output
        assert 'supported' in output

    def test_cli_debian(self):
        """Test the Debian specific options of the command line interface."""
        def run(*arguments):
            return run_cli(debian_main, '--file=%s' % BUNDLED_DEBIAN, '--date=2026-10-16', *arguments)
        assert run('--testing')[1].strip() == 'forky'
        assert run('--oldstable')[1].strip() == 'bookworm'
        assert run('--devel', '--release')[1].strip() == 'sid'
        assert run('--alias=bookworm')[1].strip() == 'oldstable'
        assert run('--elts')[1].split() == ['stretch', 'buster', 'bullseye', 'bookworm']

    def test_cli_core_columns_only(self):
        """Test the table and days output modes against a dataset without extended support columns."""
        with TemporaryDirectory() as directory:
            pathname = os.path.join(directory, 'ubuntu.csv')
            with open(pathname, 'w') as handle:
                handle.write('\n'.join(SCENARIO) + '\n')
            distro_info = DistroInfo(distributor_id='ubuntu', data_file=pathname)
            beta = distro_info.find_series('ser2')
            assert distro_info.get_milestone(beta, 'release') == datetime.date(2021, 6, 1)
            assert distro_info.get_milestone(beta, 'eol-server') is None
            assert distro_info.get_milestone(beta, 'eol-legacy') is None
            self.assertRaises(ValueError, distro_info.get_milestone, beta, 'eol-elts')

            def run(*arguments):
                return run_cli(ubuntu_main, '--file=%s' % pathname, '--date=2021-07-01', *arguments)
            exit_code, output = run('--all', '--table')
            assert exit_code == 0
            assert 'eol-legacy' in output
            assert 'ser3' in output
            assert 'unsupported' in output
            exit_code, output = run('--stable', '--days=eol-legacy')
            assert exit_code == 0
            assert output.strip() == '(unknown)'
            exit_code, output = run('--stable', '--days=release')
            assert exit_code == 0
            assert output.strip() == '-30'

    def test_cli_errors(self):
        """Test that the command line interface reports errors with a nonzero exit code."""
        def run(*arguments):
            return run_cli(ubuntu_main, '--file=%s' % BUNDLED_UBUNTU, *arguments)
        assert run('--stable', '--date=yesterday')[0] == 1
        assert run('--stable', '--date=2021-02-30')[0] == 1
        assert run('--stable', '--supported')[0] == 1
        assert run('--stable', '--release', '--fullname')[0] == 1
        assert run('--elts')[0] == 1
        assert run('--alias=bionic')[0] == 1
        assert run('--stable', '--days=eol-elts')[0] == 1
        assert run('--stable', 'positional')[0] == 1
        assert run('--series=bogus')[0] == 1
        assert run('--devel', '--date=2099-01-01')[0] == 1
        with TemporaryDirectory() as directory:
            pathname = os.path.join(directory, 'ubuntu.csv')
            with open(pathname, 'w') as handle:
                handle.write('\n'.join(SCENARIO + ['4.0,delta,ser1,2023-01-01']) + '\n')
            assert run_cli(ubuntu_main, '--file=%s' % pathname, '--all')[0] == 1

    def test_cli_usage(self):
        """Test that the usage message is shown when no selector is given."""
        exit_code, output = run_cli(ubuntu_main)
        assert exit_code == 0
        assert 'ubuntu-lifecycle' in output
        exit_code, output = run_cli(ubuntu_main, '--version')
        assert exit_code == 0
        assert 'Version:' in output


def date_range(start, end):
    """Generate the dates from `start` up to and including `end` (``YYYY-MM-DD`` strings)."""
    value = parse_date(start)
    end = parse_date(end)
    while value <= end:
        yield value
        value += datetime.timedelta(days=1)


def find(records, series):
    """Find a record by its series name."""
    return next(r for r in records if r.series == series)


def series_of(records):
    """Get the series names of a list of records."""
    return [r.series for r in records]
