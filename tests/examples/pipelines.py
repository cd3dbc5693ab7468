"""Sample Tekton documents shared by tests."""

HEADER = 'apiVersion: tekton.dev/v1alpha1\nkind: Pipeline\n'

PIPELINE = (
    'apiVersion: tekton.dev/v1alpha1\n'
    'kind: Pipeline\n'
    'metadata:\n'
    '  name: build-and-deploy\n'
    'spec:\n'
    '  resources:\n'
    '    - name: source-repo\n'
    '      type: git\n'
    '    - name: web-image\n'
    '      type: image\n'
    '  tasks:\n'
    '    - name: build\n'
    '      taskRef:\n'
    '        name: build-task\n'
    '    - name: deploy\n'
    '      taskRef:\n'
    '        name: deploy-task\n'
    '        kind: ClusterTask\n'
    '      runAfter:\n'
    '        - build\n'
    '      resources:\n'
    '        inputs:\n'
    '          - name: image\n'
    '            resource: web-image\n'
    '            from:\n'
    '              - lint\n'
)

FOREIGN = (
    'apiVersion: v1\n'
    'kind: Pipeline\n'
    'metadata:\n'
    '  name: not-tekton\n'
    'spec:\n'
    '  tasks:\n'
    '    - name: ignored\n'
    '      taskRef:\n'
    '        name: ignored-task\n'
)
