"""Pytest configuration and shared storyboard fixtures."""

import pytest

from storyboard2swiftui.config import ConverterConfig
from storyboard2swiftui.parser.storyboard_parser import parse_storyboard_string


SAMPLE_STORYBOARD = """
<?xml version="1.0" encoding="UTF-8"?>
<document type="com.apple.InterfaceBuilder3.CocoaTouch.Storyboard" version="3.0">
  <scenes>
    <scene sceneID="1">
      <objects>
        <navigationController id="nav1" sceneMemberID="viewController">
          <navigationBar key="navigationBar" contentMode="scaleToFill" id="navBar1"/>
          <connections>
            <segue destination="vc1" kind="relationship" relationship="rootViewController" id="rel1"/>
          </connections>
        </navigationController>

        <tabBarController id="tab1" sceneMemberID="viewController">
          <tabBar key="tabBar" contentMode="scaleToFill" id="tabBar1"/>
          <connections>
            <segue destination="vc1" kind="relationship" relationship="viewControllers" id="tabrel1"/>
          </connections>
        </tabBarController>

        <viewController storyboardIdentifier="Home" id="vc1" customClass="MyViewController" sceneMemberID="viewController">
          <view key="view" contentMode="scaleToFill" id="view1">
            <subviews>
              <label id="label1" text="Welcome!">
                <rect key="frame" x="20" y="40" width="200" height="30"/>
              </label>
            </subviews>
            <constraints>
              <constraint firstItem="label1" firstAttribute="top" secondItem="view1" secondAttribute="top" constant="40" id="c1"/>
            </constraints>
          </view>
        </viewController>
      </objects>
    </scene>
  </scenes>
</document>
"""

NAVIGATION_STORYBOARD = """
<?xml version="1.0" encoding="UTF-8"?>
<document type="com.apple.InterfaceBuilder3.CocoaTouch.Storyboard" version="3.0">
  <scenes>
    <scene sceneID="1">
      <objects>
        <navigationController id="nav1">
          <connections>
            <segue destination="home" kind="relationship" relationship="rootViewController" id="rel1"/>
          </connections>
        </navigationController>
      </objects>
    </scene>
    <scene sceneID="2">
      <objects>
        <viewController storyboardIdentifier="Home" id="home">
          <view key="view" id="homeView">
            <subviews>
              <label id="title" text="Home">
                <rect key="frame" x="20" y="100" width="200" height="30"/>
              </label>
              <button id="next" title="Next">
                <rect key="frame" x="20" y="150" width="200" height="44"/>
              </button>
            </subviews>
          </view>
          <connections>
            <segue destination="detail" kind="show" id="toDetail"/>
            <segue destination="settings" kind="presentation" id="toSettings"/>
            <segue destination="missing" kind="push" id="toMissing"/>
          </connections>
        </viewController>
      </objects>
    </scene>
    <scene sceneID="3">
      <objects>
        <viewController storyboardIdentifier="Detail" id="detail">
          <view key="view" id="detailView"/>
        </viewController>
      </objects>
    </scene>
    <scene sceneID="4">
      <objects>
        <viewController id="settings">
          <view key="view" id="settingsView"/>
        </viewController>
      </objects>
    </scene>
  </scenes>
</document>
"""

FLAT_STORYBOARD = """
<?xml version="1.0" encoding="UTF-8"?>
<document type="com.apple.InterfaceBuilder3.CocoaTouch.Storyboard" version="3.0">
  <scenes>
    <scene sceneID="1">
      <objects>
        <viewController id="vc1">
          <view key="view" id="view1">
            <subviews>
              <label id="hello" text="Hello">
                <rect key="frame" x="20" y="20" width="200" height="30"/>
              </label>
            </subviews>
          </view>
        </viewController>
      </objects>
    </scene>
  </scenes>
</document>
"""

XIB_VIEWS = """
<?xml version="1.0" encoding="UTF-8"?>
<document type="com.apple.InterfaceBuilder3.CocoaTouch.XIB" version="3.0">
  <objects>
    <view id="view1">
      <subviews>
        <button id="b1" title="Go">
          <rect key="frame" x="0" y="10" width="100" height="40"/>
        </button>
      </subviews>
    </view>
  </objects>
</document>
"""

XIB_TABLE_CELL = """
<?xml version="1.0" encoding="UTF-8"?>
<document type="com.apple.InterfaceBuilder3.CocoaTouch.XIB" version="3.0">
  <objects>
    <tableViewCell id="cell1">
      <tableViewCellContentView key="view" id="view1">
        <subviews>
          <label id="label1" text="Hello"/>
        </subviews>
      </tableViewCellContentView>
    </tableViewCell>
  </objects>
</document>
"""


@pytest.fixture
def config():
    """Default converter configuration."""
    return ConverterConfig()


@pytest.fixture
def sample_root():
    """Storyboard with a navigation controller, a tab bar and one screen."""
    return parse_storyboard_string(SAMPLE_STORYBOARD)


@pytest.fixture
def navigation_root():
    """Storyboard with a root screen and show/presentation/push segues."""
    return parse_storyboard_string(NAVIGATION_STORYBOARD)


@pytest.fixture
def flat_root():
    """Storyboard with a single view controller and no navigation."""
    return parse_storyboard_string(FLAT_STORYBOARD)


@pytest.fixture
def write_storyboard(tmp_path):
    """Write storyboard text to a temporary file and return its path."""

    def _write(text, name="Main.storyboard"):
        path = tmp_path / name
        path.write_text(text.strip(), encoding="utf-8")
        return str(path)

    return _write
