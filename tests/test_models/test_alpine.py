"""Tests for the alpine-data root model."""

import pytest
from pydantic import ValidationError

from lift.models.alpine import DEFAULT_REPOSITORIES, AlpineData, init_alpine_data
from lift.models.network import NetworkSettings
from lift.models.sshd import SSHD
from lift.models.system import DRProvision, PackagesConfig, User, WriteFile


class TestAlpineData:
    """Test AlpineData model."""

    def test_zero_values(self):
        """Test an empty document decodes to zero values."""
        data = AlpineData.model_validate({})

        assert data.root_password == ""
        assert data.motd == ""
        assert data.network is None
        assert data.packages is None
        assert data.dr_provision is None
        assert data.sshd is None
        assert data.mta is None
        assert data.groups == []
        assert data.users == []
        assert data.runcmd == []
        assert data.write_files == []
        assert data.disks == []
        assert data.unlift is False

    def test_document_keys(self):
        """Test fields are read from their document keys."""
        data = AlpineData.model_validate({
            "password": "$6$hash",
            "motd": "Welcome",
            "scratch_disk": "/dev/vdb",
            "unlift": True,
            "write_files": [{"path": "/etc/issue", "content-url": "http://example.com/issue"}],
        })

        assert data.root_password == "$6$hash"
        assert data.motd == "Welcome"
        assert data.scratch_disk == "/dev/vdb"
        assert data.unlift is True
        assert data.write_files[0].content_url == "http://example.com/issue"
        assert data.write_files[0].path == "/etc/issue"

    def test_groups_single_string(self):
        """Test a single group is promoted to a list."""
        data = AlpineData.model_validate({"groups": "wheel"})

        assert data.groups == ["wheel"]

    def test_groups_list(self):
        """Test a list of groups is kept unchanged."""
        data = AlpineData.model_validate({"groups": ["wheel", "docker"]})

        assert data.groups == ["wheel", "docker"]

    def test_runcmd_entries(self):
        """Test every boot command is itself one or many strings."""
        data = AlpineData.model_validate({
            "runcmd": ["rc-update add sshd", ["sh", "-c", "echo hi"], []],
        })

        assert data.runcmd == [["rc-update add sshd"], ["sh", "-c", "echo hi"], []]

    def test_sshd_partial_section(self):
        """Test decoding does not pull in defaults."""
        data = AlpineData.model_validate({"sshd": {"port": 2222}})

        assert data.sshd.port == 2222
        assert data.sshd.listen_address == ""
        assert data.sshd.authorized_keys == []
        assert data.sshd.permit_root_login is False
        assert data.sshd.permit_empty_passwords is False
        assert data.sshd.password_authentication is False

    def test_empty_section_is_present(self):
        """Test an empty section is distinguishable from an absent one."""
        data = AlpineData.model_validate({"mta": {}})

        assert data.mta is not None
        assert data.mta.server == ""
        assert data.mta.use_tls is False

    def test_users(self):
        """Test user entries."""
        data = AlpineData.model_validate({
            "users": [{
                "name": "alice",
                "gecos": "Alice",
                "homedir": "/home/alice",
                "shell": "/bin/ash",
                "primary_group": "users",
                "groups": "wheel",
                "ssh_authorized_keys": ["ssh-ed25519 AAAA alice"],
                "passwd": "$6$hash",
            }],
        })

        user = data.users[0]
        assert isinstance(user, User)
        assert user.name == "alice"
        assert user.gecos == "Alice"
        assert user.groups == ["wheel"]
        assert user.no_create_homedir is False
        assert user.system is False
        assert user.ssh_authorized_keys == ["ssh-ed25519 AAAA alice"]

    def test_network_nested_sections(self):
        """Test nested network sections."""
        data = AlpineData.model_validate({
            "network": {
                "hostname": "node1",
                "interfaces": "auto eth0\niface eth0 inet dhcp\n",
                "resolv_conf": {"nameservers": "8.8.8.8", "domain": "lan"},
                "ntp": {"servers": ["ntp1", "ntp2"]},
            },
        })

        assert data.network.hostname == "node1"
        assert data.network.interfaces.startswith("auto eth0")
        assert data.network.resolv_conf.nameservers == ["8.8.8.8"]
        assert data.network.resolv_conf.search_domains == []
        assert data.network.ntp.servers == ["ntp1", "ntp2"]
        assert data.network.ntp.pools == []
        assert data.network.proxy == ""

    def test_invalid_port(self):
        """Test port must be an integer."""
        with pytest.raises(ValidationError) as exc_info:
            AlpineData.model_validate({"sshd": {"port": "22"}})

        assert exc_info.value.errors()[0]["loc"] == ("sshd", "port")

    def test_invalid_nested_multistring(self):
        """Test a bad MultiString fails the whole document."""
        with pytest.raises(ValidationError) as exc_info:
            AlpineData.model_validate({"users": [{"name": "bob", "groups": {"a": 1}}]})

        assert exc_info.value.errors()[0]["loc"] == ("users", 0, "groups")

    def test_to_document(self):
        """Test encoding uses document keys."""
        data = AlpineData(root_password="secret", write_files=[WriteFile(content_url="http://x")])

        document = data.to_document()
        assert document["password"] == "secret"
        assert document["write_files"][0]["content-url"] == "http://x"
        assert "root_password" not in document

    def test_to_document_round_trip(self):
        """Test encoding then decoding gives an equal model."""
        data = AlpineData.model_validate({
            "password": "pw",
            "groups": "wheel",
            "runcmd": ["echo 1", ["echo", "2"]],
            "network": {"hostname": "h", "resolv_conf": {"nameservers": "1.1.1.1"}},
            "disks": [{"device": "/dev/vdb", "filesystem": "ext4", "mountpoint": "/data"}],
            "mta": {"server": "smtp.example.com", "use_starttls": True},
        })

        assert AlpineData.model_validate(data.to_document()) == data


class TestInitAlpineData:
    """Test baseline defaults."""

    def test_defaults(self):
        """Test the default values."""
        data = init_alpine_data()

        assert data.unlift is True
        assert data.timezone == "UTC"
        assert data.keymap == "us us"
        assert data.network == NetworkSettings(hostname="alpine")
        assert data.sshd == SSHD(
            port=22,
            listen_address="0.0.0.0",
            permit_root_login=True,
            permit_empty_passwords=False,
            password_authentication=False,
        )
        assert data.dr_provision == DRProvision(install_runner=True)
        assert data.packages == PackagesConfig(repositories=DEFAULT_REPOSITORIES)
        assert data.mta is None
        assert data.users == []
        assert data.groups == []
        assert data.root_password == ""

    def test_repositories(self):
        """Test the default package repositories."""
        data = init_alpine_data()

        assert data.packages.repositories == [
            "http://dl-cdn.alpinelinux.org/alpine/v3.8/main",
            "http://dl-cdn.alpinelinux.org/alpine/v3.8/community",
        ]
        assert data.packages.install == []
        assert data.packages.update is False

    def test_deterministic(self):
        """Test two default instances are equal."""
        assert init_alpine_data() == init_alpine_data()

    def test_instances_independent(self):
        """Test default instances do not share list state."""
        first = init_alpine_data()
        second = init_alpine_data()

        assert first.packages.repositories is not second.packages.repositories

    def test_default_sshd_projection(self):
        """Test the projection of the default sshd section."""
        assert init_alpine_data().sshd.kv_map() == {
            "Port": "22",
            "ListenAddress": "0.0.0.0",
            "PermitRootLogin": "yes",
            "PermitEmptyPasswords": "no",
            "PasswordAuthentication": "no",
        }
