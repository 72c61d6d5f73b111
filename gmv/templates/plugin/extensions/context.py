from copier_templates_extensions import ContextHook


class BuildContextUpdater(ContextHook):
    """Derive Java source locations and plugin marker coordinates."""

    def hook(self, context):
        plugin_class = context.get("plugin_class")
        if not plugin_class:
            return

        package, _, simple_name = plugin_class.rpartition(".")
        derived = {
            "plugin_package": package,
            "plugin_simple_name": simple_name,
            "plugin_source_path": "src/main/java/" + plugin_class.replace(".", "/") + ".java",
            "plugin_marker": "{0}:{0}.gradle.plugin".format(context.get("plugin_id", "")),
        }
        context.update(derived)
