"""
Tests for Gradle build file scaffolding.

Run with: python3 -m pytest gmv/utils/gradle/test_scaffold.py
"""

import os
import shutil
import tempfile
import unittest
import warnings

from gmv.utils.gradle.properties import load_properties_file
from gmv.utils.gradle.scaffold import GENERATED_FILES, generate_build_files, get_template_data
from gmv.utils.maven.config import get_definition


class TestScaffold(unittest.TestCase):
    """Test rendering the build files through copier."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.dst = os.path.join(self.temp_dir, 'plugin')

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def _read(self, name):
        with open(os.path.join(self.dst, name), 'r') as f:
            return f.read()

    def test_template_data(self):
        data = get_template_data(get_definition('0.2.0'))

        self.assertEqual(data['plugin_id'], 'org.wallentines.gradle-multi-version')
        self.assertEqual(data['toolchain_version'], 8)
        self.assertFalse(data['remote_publishing'])

    def test_snapshot_build_script(self):
        generate_build_files(self.dst, get_definition('0.3.0-SNAPSHOT'))

        for name in GENERATED_FILES:
            self.assertTrue(os.path.isfile(os.path.join(self.dst, name)), name)

        script = self._read('build.gradle.kts')
        self.assertIn('version = "0.3.0-SNAPSHOT"', script)
        self.assertIn('JavaLanguageVersion.of(8)', script)
        self.assertIn('val multiVersion by plugins.creating', script)
        self.assertIn('implementationClass = "org.wallentines.gradle.mv.MultiVersionPlugin"', script)
        self.assertIn('publications.create<MavenPublication>("maven")', script)
        self.assertIn('if (project.hasProperty("pubUrl"))', script)
        self.assertIn('name = "pub"', script)
        self.assertIn('credentials(PasswordCredentials::class.java)', script)
        self.assertIn('src/main/java/org/wallentines/gradle/mv/MultiVersionPlugin.java', script)

        self.assertEqual(
            self._read('settings.gradle.kts').strip(),
            'rootProject.name = "gradle-multi-version"',
        )

    def test_context_hook_updates_in_place(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('always')
            generate_build_files(self.dst, get_definition())

        hook_warnings = [w for w in caught if 'hook' in str(w.message)]
        self.assertEqual(hook_warnings, [])
        self.assertIn('MultiVersionPlugin.java', self._read('build.gradle.kts'))

    def test_release_build_script_has_no_remote(self):
        generate_build_files(self.dst, get_definition('0.2.0'))

        script = self._read('build.gradle.kts')
        self.assertIn('version = "0.2.0"', script)
        self.assertNotIn('pubUrl', script)
        self.assertNotIn('PasswordCredentials', script)

    def test_gradle_properties_has_no_active_entries(self):
        generate_build_files(self.dst, get_definition())

        # Everything in the generated file is commented out
        self.assertEqual(load_properties_file(os.path.join(self.dst, 'gradle.properties')), {})
        self.assertIn(
            'org.wallentines.gradle-multi-version:org.wallentines.gradle-multi-version.gradle.plugin',
            self._read('gradle.properties'),
        )

    def test_extra_data_overrides_definition(self):
        generate_build_files(self.dst, get_definition(), extra_data={'version': '0.3.1-SNAPSHOT'})

        self.assertIn('version = "0.3.1-SNAPSHOT"', self._read('build.gradle.kts'))


if __name__ == '__main__':
    unittest.main()
