"""
Tests for the gmv command line interface.

Run with: python3 -m pytest gmv/commands/test_commands.py
"""

import io
import json
import os
import shutil
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import Mock, patch

from gmv.cli import Cli, main
from gmv.utils.context.context import CliContext

REPO_URL = 'https://repo.example.com/releases'


class CommandTestCase(unittest.TestCase):

    def setUp(self):
        self.project_dir = tempfile.mkdtemp()
        env = {'GRADLE_USER_HOME': os.path.join(self.project_dir, 'no-gradle-home')}
        self.env_patcher = patch.dict(os.environ, env, clear=True)
        self.env_patcher.start()

    def tearDown(self):
        self.env_patcher.stop()
        shutil.rmtree(self.project_dir)

    def run_cli(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            main(list(argv))
        return out.getvalue()


class TestCli(CommandTestCase):
    """Test the root command."""

    def test_command_list(self):
        self.assertEqual(Cli([]).get_command_list(), ['new', 'publish', 'resolve'])

    def test_no_command(self):
        with self.assertRaises(SystemExit) as context:
            self.run_cli()
        self.assertEqual(context.exception.code, 1)

    def test_context_defaults_to_cwd(self):
        self.assertEqual(CliContext().project_dir, os.getcwd())


class TestResolveCommand(CommandTestCase):
    """Test gmv resolve."""

    def test_summary(self):
        output = self.run_cli('resolve', '--project-dir', self.project_dir)

        self.assertIn('Targets: [default]', output)
        self.assertIn('org.wallentines.gradle-multi-version', output)

    def test_json_with_pub_url(self):
        output = self.run_cli(
            'resolve', '--project-dir', self.project_dir, f'-PpubUrl={REPO_URL}', '--json'
        )
        data = json.loads(output)

        self.assertEqual([t['name'] for t in data['publications']], ['default', 'pub'])
        self.assertEqual(data['publications'][1]['url'], REPO_URL)

    def test_pub_url_from_environment(self):
        os.environ['ORG_GRADLE_PROJECT_pubUrl'] = REPO_URL

        output = self.run_cli('resolve', '--project-dir', self.project_dir)

        self.assertIn(f'pub@{REPO_URL}', output)

    def test_empty_pub_url(self):
        with self.assertRaises(SystemExit) as context:
            self.run_cli('resolve', '--project-dir', self.project_dir, '-PpubUrl')
        self.assertEqual(context.exception.code, 1)

    def test_invalid_tool_config(self):
        with open(os.path.join(self.project_dir, 'gmv.toml'), 'w') as f:
            f.write('properties = "oops"\n')

        out = io.StringIO()
        with redirect_stdout(out), self.assertRaises(SystemExit) as context:
            main(['resolve', '--project-dir', self.project_dir])
        self.assertEqual(context.exception.code, 1)
        self.assertIn("ERROR: Invalid gmv.toml", out.getvalue())

    def test_malformed_gradle_properties(self):
        with open(os.path.join(self.project_dir, 'gradle.properties'), 'w') as f:
            f.write('name=\\u12\n')

        out = io.StringIO()
        with redirect_stdout(out), self.assertRaises(SystemExit) as context:
            main(['resolve', '--project-dir', self.project_dir])
        self.assertEqual(context.exception.code, 1)
        self.assertIn('ERROR: Invalid gradle.properties', out.getvalue())

    def test_latin1_gradle_properties(self):
        with open(os.path.join(self.project_dir, 'gradle.properties'), 'wb') as f:
            f.write(b'author=Jos\xe9\npubUrl=' + REPO_URL.encode('ascii') + b'\n')

        output = self.run_cli('resolve', '--project-dir', self.project_dir)

        self.assertIn(f'pub@{REPO_URL}', output)

    def test_unknown_definition(self):
        with self.assertRaises(SystemExit) as context:
            self.run_cli('resolve', '--project-dir', self.project_dir, '--definition', '9.9.9')
        self.assertEqual(context.exception.code, 1)


class TestPublishCommand(CommandTestCase):
    """Test gmv publish."""

    @patch('gmv.utils.maven.publisher.subprocess.run')
    def test_publish_local(self, mock_run):
        mock_run.return_value = Mock(returncode=0, stderr='')

        output = self.run_cli('publish', '--project-dir', self.project_dir)

        self.assertIn('Successfully published to default', output)
        self.assertEqual(mock_run.call_args[0][0][1], 'publishToMavenLocal')

    @patch('gmv.utils.maven.publisher.subprocess.run')
    def test_publish_remote_with_credentials(self, mock_run):
        mock_run.return_value = Mock(returncode=0, stderr='')
        with open(os.path.join(self.project_dir, 'gradle.properties'), 'w') as f:
            f.write(f'pubUrl={REPO_URL}\npubUsername=alice\npubPassword=s3cret\n')

        self.run_cli('publish', 'pub', '-y', '--project-dir', self.project_dir)

        args, kwargs = mock_run.call_args
        self.assertEqual(args[0][1], 'publishAllPublicationsToPubRepository')
        self.assertEqual(kwargs['env']['ORG_GRADLE_PROJECT_pubUsername'], 'alice')

    @patch('gmv.utils.maven.publisher.subprocess.run')
    def test_publish_remote_without_credentials(self, mock_run):
        with self.assertRaises(SystemExit) as context:
            self.run_cli(
                'publish', 'pub', '-y', '--project-dir', self.project_dir, f'-PpubUrl={REPO_URL}'
            )

        self.assertEqual(context.exception.code, 1)
        mock_run.assert_not_called()

    def test_publish_remote_without_pub_url(self):
        with self.assertRaises(SystemExit) as context:
            self.run_cli('publish', 'pub', '-y', '--project-dir', self.project_dir)
        self.assertEqual(context.exception.code, 1)

    @patch('builtins.input', return_value='n')
    @patch('gmv.utils.maven.publisher.subprocess.run')
    def test_publish_remote_aborted(self, mock_run, mock_input):
        with self.assertRaises(SystemExit):
            self.run_cli(
                'publish', 'pub', '--project-dir', self.project_dir, f'-PpubUrl={REPO_URL}'
            )
        mock_run.assert_not_called()


class TestNewCommand(CommandTestCase):
    """Test gmv new."""

    @patch('gmv.commands.new.generate_build_files')
    def test_new(self, mock_generate):
        dst = os.path.join(self.project_dir, 'plugin')
        mock_generate.return_value = dst

        output = self.run_cli('new', dst, '--definition', '0.2.0', '--data', 'remote_publishing=true')

        args, kwargs = mock_generate.call_args
        self.assertEqual(args[0], dst)
        self.assertEqual(args[1].version, '0.2.0')
        self.assertEqual(kwargs['extra_data'], {'remote_publishing': True})
        self.assertFalse(kwargs['overwrite'])
        self.assertIn('build.gradle.kts', output)

    @patch('gmv.commands.new.generate_build_files')
    def test_new_refuses_to_overwrite(self, mock_generate):
        with open(os.path.join(self.project_dir, 'build.gradle.kts'), 'w') as f:
            f.write('// existing\n')

        with self.assertRaises(SystemExit) as context:
            self.run_cli('new', self.project_dir)

        self.assertEqual(context.exception.code, 1)
        mock_generate.assert_not_called()


if __name__ == '__main__':
    unittest.main()
